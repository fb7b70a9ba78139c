"""Test configuration and fixtures."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from mucomvoice.formats.mucom88.voice import op2offset


def build_voice(
    name: bytes = b"",
    algorithm: int = 0,
    feedback: int = 0,
    ops=None,
) -> bytes:
    """
    Build a 32-byte MUCOM88 voice.

    Args:
        name: Raw name bytes (up to 6)
        algorithm: Algorithm 0-7
        feedback: Feedback 0-7
        ops: Up to four dicts with keys ml, dt, tl, ar, ks, dr, am, sr, rr, sl
    """
    data = bytearray(32)
    for op, params in enumerate(ops or []):
        k = op2offset(op)
        data[1 + k] = params.get("dt", 0) << 4 | params.get("ml", 0)
        data[5 + k] = params.get("tl", 0)
        data[9 + k] = params.get("ks", 0) << 6 | params.get("ar", 0)
        data[13 + k] = params.get("am", 0) << 7 | params.get("dr", 0)
        data[17 + k] = params.get("sr", 0)
        data[21 + k] = params.get("sl", 0) << 4 | params.get("rr", 0)
    data[25] = feedback << 3 | algorithm
    data[26 : 26 + len(name)] = name[:6]
    return bytes(data)


@pytest.fixture
def make_voice():
    """Return the voice builder."""
    return build_voice


@pytest.fixture
def piano_voice():
    """A named algorithm-4 voice with distinct per-operator values."""
    return build_voice(
        name=b"PIANO",
        algorithm=4,
        feedback=5,
        ops=[
            {"ml": 1, "dt": 3, "tl": 30, "ar": 31, "ks": 1, "dr": 10, "am": 0, "sr": 2, "rr": 7, "sl": 4},
            {"ml": 3, "dt": 5, "tl": 0, "ar": 28, "ks": 2, "dr": 12, "am": 1, "sr": 4, "rr": 8, "sl": 5},
            {"ml": 2, "dt": 7, "tl": 45, "ar": 25, "ks": 3, "dr": 14, "am": 0, "sr": 6, "rr": 9, "sl": 6},
            {"ml": 15, "dt": 4, "tl": 10, "ar": 20, "ks": 0, "dr": 16, "am": 1, "sr": 8, "rr": 15, "sl": 15},
        ],
    )


@pytest.fixture
def plain_names():
    """Collaborators that keep tests independent of the romanization library."""
    return {"transliterate": lambda s: s, "make_safe": lambda s: s.lower().replace(" ", "-")}
