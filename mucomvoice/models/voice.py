"""
Voice data models for MUCOM88 patches.
"""

from dataclasses import dataclass

from mucomvoice.analysis.category import Category

DEFAULT_PREFIX = "MUCOM88"


@dataclass(frozen=True)
class Operator:
    """
    Parameters of one FM operator, as stored in the bank.

    Attributes:
        multiple: Frequency multiple (0-15)
        detune: Detune (0-7, 4-7 are negative)
        total_level: Attenuation (0-127, 127 is silent)
        attack_rate: Attack rate (0-31)
        key_scale: Key scale rate (0-3)
        decay_rate: First decay rate (0-31)
        amplitude_modulation: AM enable (0-1)
        sustain_rate: Second decay rate (0-31)
        release_rate: Release rate (0-15)
        sustain_level: Sustain level (0-15)
    """

    multiple: int
    detune: int
    total_level: int
    attack_rate: int
    key_scale: int
    decay_rate: int
    amplitude_modulation: int
    sustain_rate: int
    release_rate: int
    sustain_level: int


@dataclass(frozen=True)
class NamedVoice:
    """
    Name and category derived from a voice record.

    Computed once per record and shared by all writers.

    Attributes:
        index: Zero-based position in the bank
        decoded_name: Name as decoded from the bank ("" if unnamed)
        sanitized_name: Romanized, filesystem-safe name
        patch_name: Display name used for presets and filenames
        category: Guessed instrument category
        used_fallback: True if the category is a fallback guess
    """

    index: int
    decoded_name: str
    sanitized_name: str
    patch_name: str
    category: Category
    used_fallback: bool = False

    @property
    def is_empty(self) -> bool:
        """Check if the voice has no name."""
        return self.decoded_name == ""


def make_patch_name(index: int, sanitized_name: str, prefix: str = DEFAULT_PREFIX) -> str:
    """
    Build a patch display name.

    Example:
        >>> make_patch_name(3, "piano")
        'MUCOM88-003-piano'
        >>> make_patch_name(3, "")
        'MUCOM88-003'
    """
    if sanitized_name:
        return f"{prefix}-{index:03d}-{sanitized_name}"
    return f"{prefix}-{index:03d}"
