"""Utility functions for mucomvoice."""

from mucomvoice.utils.charset import GLYPHS, decode_name, combine_dakuten
from mucomvoice.utils.romanize import romanize, sanitize
from mucomvoice.utils.validation import ValidationError, validate_prefix, validate_voice_size

__all__ = [
    "GLYPHS",
    "decode_name",
    "combine_dakuten",
    "romanize",
    "sanitize",
    "ValidationError",
    "validate_prefix",
    "validate_voice_size",
]
