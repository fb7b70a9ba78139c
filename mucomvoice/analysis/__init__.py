"""Voice analysis helpers."""

from mucomvoice.analysis.category import (
    Category,
    Classification,
    EMPTY_NAME_CATEGORY,
    FALLBACK_CATEGORY,
    classify,
)

__all__ = [
    "Category",
    "Classification",
    "EMPTY_NAME_CATEGORY",
    "FALLBACK_CATEGORY",
    "classify",
]
