"""
MUCOM88 voice record decoder.

A MUCOM88 voice bank (voice.dat) is a sequence of 32-byte records laid
out like the OPN register blocks:

    Offset  Content
    0       Unused
    1-4     DT/MULTI       (bits 4-6 detune, bits 0-3 multiple)
    5-8     TL             (bits 0-6 total level)
    9-12    KS/AR          (bits 6-7 key scale, bits 0-4 attack rate)
    13-16   AM/DR          (bit 7 AM, bits 0-4 decay rate)
    17-20   SR             (bits 0-4 sustain rate)
    21-24   SL/RR          (bits 4-7 sustain level, bits 0-3 release rate)
    25      FB/AL          (bits 3-5 feedback, bits 0-2 algorithm)
    26-31   Name           (zero-terminated)

Within each 4-byte block the operators follow register order, so
operators 2 and 3 are swapped (see op2offset).
"""

import logging
from dataclasses import dataclass
from typing import Callable, List

from mucomvoice.analysis.category import classify
from mucomvoice.models.voice import DEFAULT_PREFIX, NamedVoice, Operator, make_patch_name
from mucomvoice.utils.charset import combine_dakuten, decode_name
from mucomvoice.utils.romanize import romanize, sanitize
from mucomvoice.utils.validation import validate_voice_size

logger = logging.getLogger(__name__)

VOICE_SIZE = 32
NAME_OFFSET = 26
NAME_LENGTH = 6
OPERATOR_COUNT = 4


class Offsets:
    """Block offsets within a voice record."""

    DT_ML = 1
    TL = 5
    KS_AR = 9
    AM_DR = 13
    SR = 17
    SL_RR = 21
    FB_AL = 25
    NAME = NAME_OFFSET


def op2offset(op: int) -> int:
    """
    Map an operator index (0-3) to its slot within a register block.

    Operators 1 and 2 trade places: 0->0, 1->2, 2->1, 3->3.
    """
    return (op & 1) << 1 | (op & 2) >> 1


@dataclass(frozen=True)
class VoiceRecord:
    """
    One 32-byte voice of a MUCOM88 bank.

    All parameters are read from the raw bytes on access.

    Example:
        voice = VoiceRecord.from_bytes(data[0:32])
        print(voice.algorithm, voice.total_level(3))
    """

    data: bytes

    @classmethod
    def from_bytes(cls, data: bytes) -> "VoiceRecord":
        """
        Create a record from exactly 32 bytes.

        Raises:
            ValidationError: If data is not 32 bytes long
        """
        validate_voice_size(data, VOICE_SIZE)
        return cls(bytes(data))

    def _op_byte(self, block: int, op: int) -> int:
        return self.data[block + op2offset(op)]

    def multiple(self, op: int) -> int:
        return self._op_byte(Offsets.DT_ML, op) & 0x0F

    def detune(self, op: int) -> int:
        return self._op_byte(Offsets.DT_ML, op) >> 4 & 0x07

    def total_level(self, op: int) -> int:
        return self._op_byte(Offsets.TL, op) & 0x7F

    def attack_rate(self, op: int) -> int:
        return self._op_byte(Offsets.KS_AR, op) & 0x1F

    def key_scale(self, op: int) -> int:
        return self._op_byte(Offsets.KS_AR, op) >> 6

    def decay_rate(self, op: int) -> int:
        return self._op_byte(Offsets.AM_DR, op) & 0x1F

    def amplitude_modulation(self, op: int) -> int:
        return self._op_byte(Offsets.AM_DR, op) >> 7

    def sustain_rate(self, op: int) -> int:
        return self._op_byte(Offsets.SR, op) & 0x1F

    def release_rate(self, op: int) -> int:
        return self._op_byte(Offsets.SL_RR, op) & 0x0F

    def sustain_level(self, op: int) -> int:
        return self._op_byte(Offsets.SL_RR, op) >> 4

    @property
    def algorithm(self) -> int:
        return self.data[Offsets.FB_AL] & 0x07

    @property
    def feedback(self) -> int:
        return self.data[Offsets.FB_AL] >> 3 & 0x07

    @property
    def name_bytes(self) -> bytes:
        return self.data[NAME_OFFSET : NAME_OFFSET + NAME_LENGTH]

    @property
    def name(self) -> str:
        """Decoded voice name, "" if the voice is unnamed."""
        return decode_name(self.name_bytes)

    def operator(self, op: int) -> Operator:
        """Get all parameters of one operator."""
        return Operator(
            multiple=self.multiple(op),
            detune=self.detune(op),
            total_level=self.total_level(op),
            attack_rate=self.attack_rate(op),
            key_scale=self.key_scale(op),
            decay_rate=self.decay_rate(op),
            amplitude_modulation=self.amplitude_modulation(op),
            sustain_rate=self.sustain_rate(op),
            release_rate=self.release_rate(op),
            sustain_level=self.sustain_level(op),
        )

    def operators(self) -> List[Operator]:
        """Get all four operators, in operator order."""
        return [self.operator(op) for op in range(OPERATOR_COUNT)]


def sanitized_name(
    decoded_name: str,
    transliterate: Callable[[str], str] = romanize,
    make_safe: Callable[[str], str] = sanitize,
) -> str:
    """Build the filesystem-safe form of a decoded voice name."""
    return make_safe(transliterate(combine_dakuten(decoded_name)))


def name_voice(
    record: VoiceRecord,
    index: int,
    prefix: str = DEFAULT_PREFIX,
    transliterate: Callable[[str], str] = romanize,
    make_safe: Callable[[str], str] = sanitize,
) -> NamedVoice:
    """
    Derive the name, patch name and category of a voice.

    Logs a warning when the category had to fall back to the default.

    Args:
        record: Voice record
        index: Zero-based position in the bank
        prefix: Patch name prefix
        transliterate: Kana to Latin transliteration
        make_safe: Filename sanitizer

    Returns:
        NamedVoice for the record
    """
    decoded = record.name
    safe = sanitized_name(decoded, transliterate, make_safe)
    result = classify(decoded)

    if result.used_fallback:
        logger.warning("could not guess category: %s", decoded)

    return NamedVoice(
        index=index,
        decoded_name=decoded,
        sanitized_name=safe,
        patch_name=make_patch_name(index, safe, prefix),
        category=result.category,
        used_fallback=result.used_fallback,
    )
