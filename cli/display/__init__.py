"""
CLI display modules.
"""

from cli.display.tables import display_bank_info, display_voice_detail
from cli.display.formatters import hex_with_ascii, level_bar, value_bar

__all__ = [
    "display_bank_info",
    "display_voice_detail",
    "hex_with_ascii",
    "level_bar",
    "value_bar",
]
