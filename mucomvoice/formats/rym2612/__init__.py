"""RYM2612 preset format."""

from mucomvoice.formats.rym2612.tables import CARRIERS, MULTIPLE_VALUES, is_carrier
from mucomvoice.formats.rym2612.writer import (
    RYM2612_EXTENSION,
    rym2612_operator_params,
    to_rym2612,
)

__all__ = [
    "CARRIERS",
    "MULTIPLE_VALUES",
    "is_carrier",
    "RYM2612_EXTENSION",
    "rym2612_operator_params",
    "to_rym2612",
]
