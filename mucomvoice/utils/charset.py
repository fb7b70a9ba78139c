"""
MUCOM88 voice name character set.

Voice names are stored as up to 6 bytes. Bytes below 0x80 are plain ASCII,
bytes with the high bit set index the PC-8801 graphic/kana character set:

    0x80-0x9F  Block elements and box drawing
    0xA0-0xDF  Punctuation and katakana (0xDE/0xDF are the standalone
               voiced and semi-voiced marks)
    0xE0-0xEF  Graphic symbols (double lines, triangles, card suits)
    0xF0-0xF7  Cross and date/time symbols
    0xF8-0xFF  Unused (rendered as spaces)

Katakana are rendered full-width so that romanization works on them.
"""

from typing import Dict, Union

GLYPHS = (
    "▁▂▃▄▅▆▇█▏▎▍▌▋▊▉┼"  # 0x80
    "┴┬┤├▔─│▕┌┐└┘╭╮╰╯"  # 0x90
    " 。「」、・ヲァィゥェォャュョッ"  # 0xA0
    "ーアイウエオカキクケコサシスセソ"  # 0xB0
    "タチツテトナニヌネノハヒフヘホマ"  # 0xC0
    "ミムメモヤユヨラリルレロワン゛゜"  # 0xD0
    "═╞╪╡◢◣◥◤♠♥♦♣●○╱╲"  # 0xE0
    "╳円年月日時分秒        "  # 0xF0
)

DAKUTEN = "゛"
HANDAKUTEN = "゜"


def _pairs(table: str) -> Dict[str, str]:
    return {table[i]: table[i + 1] for i in range(0, len(table), 2)}


# Base kana -> voiced form
DAKUTEN_PAIRS = _pairs(
    "かがきぎくぐけげこごさざしじすずせぜそぞただちぢつづてでとどはばひびふぶへべほぼうゔ"
    "カガキギクグケゲコゴサザシジスズセゼソゾタダチヂツヅテデトドハバヒビフブヘベホボウヴ"
)

# Base kana -> semi-voiced form
HANDAKUTEN_PAIRS = _pairs("はぱひぴふぷへぺほぽ" "ハパヒピフプヘペホポ")

_MARK_TABLES = {
    DAKUTEN: DAKUTEN_PAIRS,
    HANDAKUTEN: HANDAKUTEN_PAIRS,
}

NAME_LENGTH = 6

# ASCII control bytes 0x1C-0x1F are kept; str.strip() would drop them
NAME_WHITESPACE = (
    " \t\n\v\f\r\x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def decode_char(byte: int) -> str:
    """Decode a single name byte."""
    if byte >= 0x80:
        return GLYPHS[byte - 0x80]
    return chr(byte)


def decode_name(raw: Union[bytes, bytearray]) -> str:
    """
    Decode raw voice name bytes to a string.

    Decoding stops at the first zero byte. The result is stripped of
    surrounding whitespace (NAME_WHITESPACE), so an unnamed voice decodes
    to "".

    Args:
        raw: Name bytes (only the first 6 are considered)

    Returns:
        Decoded name
    """
    chars = []
    for byte in raw[:NAME_LENGTH]:
        if byte == 0:
            break
        chars.append(decode_char(byte))
    return "".join(chars).strip(NAME_WHITESPACE)


def combine_dakuten(text: str) -> str:
    """
    Merge standalone voiced/semi-voiced marks into the preceding kana.

    A mark that has no preceding character, or whose preceding character
    has no combined form, is dropped.

    Example:
        >>> combine_dakuten("カ゛")
        'ガ'
    """
    result = []
    for char in text:
        table = _MARK_TABLES.get(char)
        if table is None:
            result.append(char)
            continue
        if result and result[-1] in table:
            result[-1] = table[result[-1]]
    return "".join(result)
