"""MUCOM88 voice bank format."""

from mucomvoice.formats.mucom88.voice import VOICE_SIZE, VoiceRecord, name_voice, op2offset
from mucomvoice.formats.mucom88.reader import MucomBankReader
from mucomvoice.formats.mucom88.text_writer import (
    MUCOM_EXTENSION,
    to_mucom_bank_text,
    to_mucom_text,
)

__all__ = [
    "VOICE_SIZE",
    "VoiceRecord",
    "name_voice",
    "op2offset",
    "MucomBankReader",
    "MUCOM_EXTENSION",
    "to_mucom_bank_text",
    "to_mucom_text",
]
