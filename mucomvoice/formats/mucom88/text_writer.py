"""
MUCOM88 MML voice text writer.

Writes voices in the "@n:{ ... }" form used inside MUCOM88 MML sources:

      @0:{
       2,  4
     31,  0,  0, 15,  0, 20,  0,  1,  3
     ...                                   (one line per operator)
     31,  0,  0, 15,  0,  0,  0,  1,  3,"Piano"}

Operator columns are AR, DR, SR, RR, SL, TL, KS, ML, DT.
"""

from typing import Iterable

from mucomvoice.formats.mucom88.voice import OPERATOR_COUNT, VoiceRecord

MUCOM_EXTENSION = ".muc"


def quote_name(name: str) -> str:
    """Double-quote a voice name, escaping quotes and backslashes."""
    escaped = name.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def to_mucom_text(record: VoiceRecord, index: int) -> str:
    """
    Format one voice as a MUCOM88 voice definition.

    Args:
        record: Voice record
        index: Voice number written after "@"

    Returns:
        Voice definition text, followed by a blank line
    """
    lines = [f"  @{index}:{{", f"{record.feedback:4d},{record.algorithm:3d}"]

    for op in range(OPERATOR_COUNT):
        values = (
            record.attack_rate(op),
            record.decay_rate(op),
            record.sustain_rate(op),
            record.release_rate(op),
            record.sustain_level(op),
            record.total_level(op),
            record.key_scale(op),
            record.multiple(op),
            record.detune(op),
        )
        lines.append(" " + ",".join(f"{v:3d}" for v in values))

    lines[-1] += f",{quote_name(record.name)}}}"
    return "\n".join(lines) + "\n\n"


def to_mucom_bank_text(records: Iterable[VoiceRecord]) -> str:
    """Format a sequence of voices, numbered from 0."""
    return "".join(to_mucom_text(record, index) for index, record in enumerate(records))
