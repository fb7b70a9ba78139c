"""Data models for MUCOM88 voice representation."""

from mucomvoice.models.voice import DEFAULT_PREFIX, NamedVoice, Operator, make_patch_name

__all__ = [
    "DEFAULT_PREFIX",
    "NamedVoice",
    "Operator",
    "make_patch_name",
]
