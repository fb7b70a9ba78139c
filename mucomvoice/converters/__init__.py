"""Converters from MUCOM88 voice banks to output files."""

from mucomvoice.converters.bank import (
    BankConverter,
    ConversionError,
    ConversionResult,
    OutputFormat,
    convert_bank,
)

__all__ = [
    "BankConverter",
    "ConversionError",
    "ConversionResult",
    "OutputFormat",
    "convert_bank",
]
