"""
Data validation utilities for MUCOM88 voice data.
"""

import re


class ValidationError(ValueError):
    """Raised when voice data or converter settings are invalid."""

    pass


def validate_voice_size(data: bytes, size: int = 32) -> None:
    """
    Validate that a voice record has exactly the expected size.

    Args:
        data: Raw record bytes
        size: Expected record size

    Raises:
        ValidationError: If the size doesn't match
    """
    if len(data) != size:
        raise ValidationError(f"Voice record must be {size} bytes, got {len(data)}")


def validate_prefix(prefix: str) -> str:
    """
    Validate the patch name prefix.

    The prefix becomes part of every output filename, so it must be a
    non-empty run of letters, digits, hyphens or underscores.

    Args:
        prefix: Patch name prefix

    Returns:
        The prefix, unchanged

    Raises:
        ValidationError: If the prefix is empty or contains unsafe characters
    """
    if not prefix:
        raise ValidationError("Patch name prefix must not be empty")

    if not re.fullmatch(r"[A-Za-z0-9_-]+", prefix):
        raise ValidationError(f"Invalid character in patch name prefix: {prefix!r}")

    return prefix
