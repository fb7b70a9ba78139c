"""
Romanization and filename sanitizing for voice names.

Kana are transliterated to Hepburn romaji with pykakasi; the result is
turned into a filesystem-safe identifier with python-slugify.
"""

import re
from functools import lru_cache

import pykakasi
from slugify import slugify

# Lowercase letters, digits, hyphens and underscores survive sanitizing
SAFE_NAME_PATTERN = r"[^-a-z0-9_]+"

# Hiragana and katakana blocks; kanji glyphs such as 円 are left alone
KANA_RUN = re.compile(r"[ぁ-ヿ]+")


@lru_cache(maxsize=1)
def _kakasi() -> "pykakasi.kakasi":
    return pykakasi.kakasi()


def _hepburn(match: "re.Match") -> str:
    return "".join(item["hepburn"] for item in _kakasi().convert(match.group()))


def romanize(text: str) -> str:
    """
    Transliterate kana in text to Latin characters.

    Characters that are not kana, kanji included, pass through unchanged.

    Example:
        >>> romanize("ピアノ")
        'piano'
        >>> romanize("円ピアノ")
        '円piano'
    """
    if not text:
        return ""
    return KANA_RUN.sub(_hepburn, text)


def sanitize(text: str) -> str:
    """
    Turn text into a single safe path segment.

    The result is lowercase, separated by hyphens, and contains no path
    separators or control characters. Characters outside ASCII are dropped
    rather than folded, so leftover kanji do not gain a reading. Sanitizing
    is idempotent.

    Example:
        >>> sanitize("Piano 1")
        'piano-1'
    """
    return slugify(text, allow_unicode=True, regex_pattern=SAFE_NAME_PATTERN)
