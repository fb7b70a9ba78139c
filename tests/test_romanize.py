"""Tests for romanization and filename sanitizing."""

import pytest

from mucomvoice.formats.mucom88.voice import sanitized_name
from mucomvoice.utils.romanize import romanize, sanitize


class TestRomanize:
    def test_katakana(self):
        assert romanize("ピアノ") == "piano"

    def test_empty(self):
        assert romanize("") == ""

    def test_kanji_glyphs_unchanged(self):
        assert romanize("♠円年") == "♠円年"
        assert romanize("円ピアノ") == "円piano"

    def test_ascii_unchanged(self):
        assert romanize("BASS 2") == "BASS 2"


class TestSanitize:
    def test_lowercase_hyphenated(self):
        assert sanitize("Piano 1") == "piano-1"

    def test_underscore_kept(self):
        assert sanitize("hi_hat") == "hi_hat"

    def test_no_path_separators(self):
        result = sanitize("A/B\\C")

        assert "/" not in result
        assert "\\" not in result
        assert result == "a-b-c"

    def test_symbols_removed(self):
        assert sanitize("E.PIANO") == "e-piano"
        assert sanitize("  ") == ""

    def test_non_ascii_dropped(self):
        assert sanitize("円年") == ""
        assert sanitize("♠piano") == "piano"

    def test_kanji_name_drops_kanji(self):
        assert sanitized_name("円ヒ゜アノ") == "piano"
        assert sanitized_name("時分秒") == ""

    @pytest.mark.parametrize("text", ["Piano 1", "E.PIANO", "a--b", "hi_hat", "X/Y", "BASS(2)"])
    def test_idempotent(self, text):
        once = sanitize(text)

        assert sanitize(once) == once
