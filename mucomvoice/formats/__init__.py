"""Format handlers for MUCOM88 banks and RYM2612 presets."""

from mucomvoice.formats.mucom88 import MucomBankReader, VoiceRecord
from mucomvoice.formats.rym2612 import to_rym2612

__all__ = ["MucomBankReader", "VoiceRecord", "to_rym2612"]
