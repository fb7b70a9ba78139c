"""Tests for instrument category guessing."""

import pytest

from mucomvoice.analysis.category import (
    CATEGORY_KEYWORDS,
    EMPTY_NAME_CATEGORY,
    FALLBACK_CATEGORY,
    KEYWORD_INDEX,
    Category,
    build_keyword_index,
    classify,
)


class TestClassify:
    @pytest.mark.parametrize(
        "name, category",
        [
            ("BASS1", Category.BASS),
            ("E.PIANO", Category.KEYS),
            ("TRUMPT", Category.LEAD),  # no keyword
            ("BELL 2", Category.BELLS),
            ("ORGN", Category.ORGAN),
            ("STRING", Category.STRINGS),
            ("KOTO", Category.PLUCKED),
            ("FLUTE", Category.REED),
            ("UFO", Category.FX),
            ("PSG", Category.SYNTH),
            ("チョッパー", Category.BASS),
            ("タムタム", Category.DRUMS),
            ("ホ゛ンコ゛", Category.DRUMS),
        ],
    )
    def test_keywords(self, name, category):
        assert classify(name).category is category

    def test_case_insensitive(self):
        assert classify("Bell").category is Category.BELLS
        assert classify("bell").category is Category.BELLS

    def test_empty_name(self):
        result = classify("")

        assert result.category is EMPTY_NAME_CATEGORY is Category.VIDEO_GAMES
        assert result.used_fallback is False

    def test_fallback(self):
        result = classify("QQQ")

        assert result.category is FALLBACK_CATEGORY is Category.LEAD
        assert result.used_fallback is True
        assert result.keyword == ""

    def test_longest_keyword_wins(self):
        # "bas" (Bass) is declared before "drum" (Drums), but "drum" is longer
        result = classify("BASDRUM")

        assert result.category is Category.DRUMS
        assert result.keyword == "drum"

    def test_longer_keyword_beats_contained_shorter(self):
        # "cowb" and "cow" both match; "tom" too, but "cowb" is longest
        assert classify("COWBTOM").keyword == "cowb"

    def test_matched_keyword_reported(self):
        assert classify("E.PIANO").keyword == "pian"


class TestKeywordIndex:
    def test_sorted_longest_first(self):
        lengths = [len(keyword.encode("utf-8")) for keyword, _ in KEYWORD_INDEX]

        assert lengths == sorted(lengths, reverse=True)

    def test_categories_without_keywords_skipped(self):
        categories = {category for _, category in KEYWORD_INDEX}

        assert Category.POLY not in categories
        assert Category.VIDEO_GAMES not in categories

    def test_every_keyword_indexed(self):
        total = sum(len(keywords) for keywords in CATEGORY_KEYWORDS.values())

        assert len(KEYWORD_INDEX) == total

    def test_ties_keep_declaration_order(self):
        table = {Category.BASS: ("abc",), Category.BRASS: ("xyz", "long")}

        assert build_keyword_index(table) == [
            ("long", Category.BRASS),
            ("abc", Category.BASS),
            ("xyz", Category.BRASS),
        ]

    def test_display_names(self):
        assert Category.DRUMS.display_name == "Drums & Percs"
        assert Category.REED.display_name == "Reed and Pipe"
        assert len(Category) == 17
