"""
Instrument category guessing from voice names.

MUCOM88 banks carry no category information, so the category is guessed
from keywords found in the (lowercased) voice name. Longer keywords are
tried first, so "drum" wins over "dr" style abbreviations regardless of
which category declares them.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Tuple


class Category(Enum):
    """RYM2612 preset categories."""

    BASS = "Bass"
    BELLS = "Bells"
    BRASS = "Brass"
    DRUMS = "Drums & Percs"
    FX = "FX"
    KEYS = "Keys"
    LEAD = "Lead"
    ORGAN = "Organ"
    PADS = "Pads"
    PLUCKED = "Plucked"
    POLY = "Poly"
    REED = "Reed and Pipe"
    RHYTHMIC = "Rhythmic"
    STRINGS = "Strings"
    SYNTH = "Synth"
    VIDEO_GAMES = "Video Games"
    WOODWINDS = "Woodwinds"

    @property
    def display_name(self) -> str:
        """Get the category name as written to presets."""
        return self.value


# Keywords per category. Katakana keywords keep their standalone voiced
# marks because matching happens before the marks are combined.
CATEGORY_KEYWORDS: Dict[Category, Tuple[str, ...]] = {
    Category.BASS: ("bas", "チョッ"),
    Category.BELLS: ("bell",),
    Category.BRASS: ("brass", "brs", "horn", "sax"),
    Category.DRUMS: (
        "cowb", "perc", "drum", "dram", "drm", "timbal", "tom", "tam",
        "hihat", "hi-hat", "hi_hat", "kik", "kick", "タムタム", "dora",
        "ホ゛ンコ゛", "ツツ゛ミ", "cow",
    ),
    Category.FX: ("laser", "train", "ufo", "car", "mushi", "sakebi", "efc", "tweet"),
    Category.KEYS: ("ep", "pian", "clav", "ap1"),
    Category.LEAD: ("main", "7th"),
    Category.ORGAN: ("orgn", "sin"),
    Category.PADS: ("back", "down", "amb"),
    Category.PLUCKED: ("guitar", "gtr", "koto", "harp", "banjo", "zitar"),
    Category.POLY: (),
    Category.REED: ("flute", "oboe", "pic", "harm", "clari", "pipe"),
    Category.RHYTHMIC: ("grock", "timp", "xylo", "vib"),
    Category.STRINGS: ("str",),
    Category.SYNTH: ("psg", "synt", "orc", "dgt"),
    Category.VIDEO_GAMES: (),
    Category.WOODWINDS: ("kuchi", "fue"),
}

# Used when the voice has no name at all
EMPTY_NAME_CATEGORY = Category.VIDEO_GAMES

# Used when no keyword matches
FALLBACK_CATEGORY = Category.LEAD


def _keyword_length(keyword: str) -> int:
    # Kana keywords rank by their encoded length, ahead of ASCII of the same
    # character count
    return len(keyword.encode("utf-8"))


def build_keyword_index(
    table: Dict[Category, Tuple[str, ...]],
) -> List[Tuple[str, Category]]:
    """
    Flatten a keyword table into (keyword, category) pairs, longest first.

    Categories without keywords contribute nothing. Keywords of equal
    length keep their declaration order.
    """
    pairs = [(keyword, category) for category, keywords in table.items() for keyword in keywords]
    return sorted(pairs, key=lambda pair: _keyword_length(pair[0]), reverse=True)


KEYWORD_INDEX = build_keyword_index(CATEGORY_KEYWORDS)


@dataclass(frozen=True)
class Classification:
    """
    Result of guessing a category.

    Attributes:
        category: The chosen category
        used_fallback: True if no keyword matched a non-empty name
        keyword: The keyword that matched, if any
    """

    category: Category
    used_fallback: bool = False
    keyword: str = ""


def classify(name: str) -> Classification:
    """
    Guess the instrument category of a voice name.

    Never fails: empty names map to EMPTY_NAME_CATEGORY and names without
    any keyword map to FALLBACK_CATEGORY with used_fallback set.

    Args:
        name: Decoded voice name (before romanization)

    Returns:
        Classification result
    """
    lowered = name.lower()
    if lowered == "":
        return Classification(EMPTY_NAME_CATEGORY)

    for keyword, category in KEYWORD_INDEX:
        if keyword in lowered:
            return Classification(category, keyword=keyword)

    return Classification(FALLBACK_CATEGORY, used_fallback=True)
