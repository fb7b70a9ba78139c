"""
RYM2612 preset writer.

Converts MUCOM88 voices to .rym2612 XML presets for the RYM2612 YM2612
emulator plugin.

Parameter mapping (per operator):
- TL is inverted (127 - TL). For carriers half of the level moves to the
  velocity sensitivity parameter (OPnVel), the rest stays in OPnTL.
- DT 0-7 becomes -3..3 (4-7 fold to 0, -1, -2, -3).
- MUL is looked up in MULTIPLE_VALUES.
- SL is inverted (15 - SL) and written as D2L.
- AR, D1R (DR), D2R (SR), RR, RS (KS) and AM are copied as is.

Operators are written OP4 first, one parameter at a time.
"""

from collections import OrderedDict
from typing import Dict, List, Tuple
from xml.sax.saxutils import quoteattr

from mucomvoice.formats.mucom88.voice import OPERATOR_COUNT, VoiceRecord
from mucomvoice.formats.rym2612.tables import MULTIPLE_VALUES, is_carrier
from mucomvoice.models.voice import NamedVoice

RYM2612_EXTENSION = ".rym2612"

# Per-operator parameter ids, in output order
OPERATOR_PARAMS = (
    "Vel",
    "TL",
    "SSGEG",
    "RS",
    "RR",
    "MW",
    "MUL",
    "Fixed",
    "DT",
    "D2R",
    "D2L",
    "D1R",
    "AR",
    "AM",
)

# Global parameters with fixed values; Feedback and Algorithm come from the voice
GLOBAL_PARAMS_HEAD = (
    ("volume", "0.4483062326908112"),
    ("Ladder_Effect", "0.0"),
    ("Output_Filtering", "0.0"),
    ("Polyphony", "8.0"),
    ("TimerA", "0.2000000029802322"),
    ("Spec_Mode", "2.0"),
    ("Pitchbend_Range", "2.0"),
    ("Legato_Retrig", "0.0"),
    ("LFO_Speed", "2.0"),
    ("LFO_Enable", "1.0"),
)
GLOBAL_PARAMS_MIDDLE = (
    ("FMSMW", "100.0"),
    ("FMS", "0.0"),
    ("DAC_Prescaler", "1.0"),
)
GLOBAL_PARAMS_TAIL = (("AMS", "0.0"),)


def fold_detune(detune: int) -> int:
    """Convert an OPN detune (0-7) to a signed detune (-3..3)."""
    if detune >= 4:
        return 4 - detune
    return detune


def split_level(total_level: int, carrier: bool) -> Tuple[int, int]:
    """
    Convert an OPN total level to RYM2612 (velocity, level).

    Example:
        >>> split_level(0, carrier=True)
        (63, 64)
        >>> split_level(0, carrier=False)
        (0, 127)
    """
    level = 127 - total_level
    velocity = 0
    if carrier:
        velocity = level // 2
        level -= velocity
    return velocity, level


def rym2612_operator_params(record: VoiceRecord, op: int) -> Dict[str, int]:
    """
    Compute the RYM2612 parameters of one operator.

    Args:
        record: Voice record
        op: Operator index (0-3)

    Returns:
        Parameter id suffix -> value, in OPERATOR_PARAMS order
    """
    velocity, level = split_level(record.total_level(op), is_carrier(record.algorithm, op))

    params = OrderedDict()
    params["Vel"] = velocity
    params["TL"] = level
    params["SSGEG"] = 0
    params["RS"] = record.key_scale(op)
    params["RR"] = record.release_rate(op)
    params["MW"] = 0
    params["MUL"] = MULTIPLE_VALUES[record.multiple(op)]
    params["Fixed"] = 0
    params["DT"] = fold_detune(record.detune(op))
    params["D2R"] = record.sustain_rate(op)
    params["D2L"] = 15 - record.sustain_level(op)
    params["D1R"] = record.decay_rate(op)
    params["AR"] = record.attack_rate(op)
    params["AM"] = record.amplitude_modulation(op)
    return params


def _param(param_id: str, value: str) -> str:
    return f'  <PARAM id="{param_id}" value="{value}"/>'


def _number(value: int) -> str:
    return f"{float(value):.1f}"


def to_rym2612(record: VoiceRecord, voice: NamedVoice) -> str:
    """
    Build a RYM2612 preset document for one voice.

    Args:
        record: Voice record
        voice: Names and category derived from the record

    Returns:
        XML document text
    """
    ops = [rym2612_operator_params(record, op) for op in range(OPERATOR_COUNT)]

    lines: List[str] = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        "",
        f"<RYM2612Params patchName={quoteattr(voice.patch_name)} "
        f'category={quoteattr(voice.category.display_name)} rating="3" type="User">',
    ]

    for name in OPERATOR_PARAMS:
        for op in reversed(range(OPERATOR_COUNT)):
            lines.append(_param(f"OP{op + 1}{name}", _number(ops[op][name])))

    lines.extend(_param(k, v) for k, v in GLOBAL_PARAMS_HEAD)
    lines.append(_param("Feedback", _number(record.feedback)))
    lines.extend(_param(k, v) for k, v in GLOBAL_PARAMS_MIDDLE)
    lines.append(_param("Algorithm", _number(record.algorithm + 1)))
    lines.extend(_param(k, v) for k, v in GLOBAL_PARAMS_TAIL)
    lines.append('  <PARAM id="masterTune"/>')
    lines.append("</RYM2612Params>")

    return "\n".join(lines) + "\n"
