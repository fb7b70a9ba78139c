"""Tests for voice name decoding."""

from mucomvoice.utils.charset import GLYPHS, combine_dakuten, decode_char, decode_name


class TestDecodeName:
    def test_ascii(self):
        assert decode_name(b"PIANO\x00") == "PIANO"

    def test_stops_at_zero(self):
        assert decode_name(b"AB\x00CD\x00") == "AB"

    def test_all_zero_is_empty(self):
        assert decode_name(bytes(6)) == ""

    def test_whitespace_only_is_empty(self):
        assert decode_name(b"   \x00\x00\x00") == ""
        assert decode_name(bytes([0xA0, 0xF8, 0xFF])) == ""

    def test_strips_surrounding_spaces(self):
        assert decode_name(b" EP 1 ") == "EP 1"

    def test_strips_tabs_and_line_breaks(self):
        assert decode_name(b"\tEP\r\n") == "EP"
        assert decode_name(b"\x0b\x0c") == ""

    def test_separator_controls_are_not_whitespace(self):
        # 0x1C-0x1F are a name, so the voice is not treated as unnamed
        assert decode_name(b"\x1c\x1c") == "\x1c\x1c"
        assert decode_name(b" \x1fA ") == "\x1fA"

    def test_only_six_bytes(self):
        assert decode_name(b"ABCDEFGH") == "ABCDEF"

    def test_katakana(self):
        # ﾋﾟｱﾉ
        assert decode_name(bytes([0xCB, 0xDF, 0xB1, 0xC9])) == "ヒ゜アノ"

    def test_graphic_glyphs(self):
        assert decode_char(0x80) == "▁"
        assert decode_char(0x8F) == "┼"
        assert decode_char(0xE8) == "♠"
        assert decode_char(0xF1) == "円"
        assert decode_char(0xDE) == "゛"
        assert decode_char(0xDF) == "゜"

    def test_table_size(self):
        assert len(GLYPHS) == 128

    def test_deterministic(self):
        raw = bytes([0xB6, 0xDE, 0x41, 0x00, 0x42, 0x43])
        assert decode_name(raw) == decode_name(raw) == "カ゛A"


class TestCombineDakuten:
    def test_voiced(self):
        assert combine_dakuten("か゛") == "が"
        assert combine_dakuten("カ゛") == "ガ"
        assert combine_dakuten("ウ゛") == "ヴ"

    def test_semi_voiced(self):
        assert combine_dakuten("ハ゜") == "パ"
        assert combine_dakuten("ヒ゜アノ") == "ピアノ"

    def test_leading_mark_dropped(self):
        assert combine_dakuten("゛カ") == "カ"

    def test_ineligible_base_drops_mark(self):
        assert combine_dakuten("ア゛") == "ア"
        assert combine_dakuten("カ゜") == "カ"
        assert combine_dakuten("A゛B") == "AB"

    def test_double_mark(self):
        # Second mark follows the already combined ガ, which has no voiced form
        assert combine_dakuten("カ゛゛") == "ガ"

    def test_plain_text_unchanged(self):
        assert combine_dakuten("BASS 2") == "BASS 2"
        assert combine_dakuten("") == ""
