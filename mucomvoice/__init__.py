"""
mucomvoice - Converter for MUCOM88 FM voice banks.

This library provides tools to:
- Read MUCOM88 voice banks (voice.dat)
- Recover voice names from the PC-8801 character set
- Guess instrument categories from voice names
- Write voices as RYM2612 presets (.rym2612) or MUCOM88 MML voice text

Example usage:
    from mucomvoice import MucomBankReader, convert_bank

    # List voices
    for voice in MucomBankReader.read("voice.dat"):
        print(voice.name, voice.algorithm)

    # Convert to RYM2612 presets
    result = convert_bank("voice.dat", "output")
"""

__version__ = "0.1.0"
__author__ = "mucomvoice Contributors"

from mucomvoice.analysis.category import Category, classify
from mucomvoice.converters.bank import BankConverter, ConversionError, OutputFormat, convert_bank
from mucomvoice.formats.mucom88.reader import MucomBankReader
from mucomvoice.formats.mucom88.voice import VoiceRecord, name_voice
from mucomvoice.models.voice import NamedVoice, Operator

__all__ = [
    "Category",
    "classify",
    "BankConverter",
    "ConversionError",
    "OutputFormat",
    "convert_bank",
    "MucomBankReader",
    "VoiceRecord",
    "name_voice",
    "NamedVoice",
    "Operator",
]
