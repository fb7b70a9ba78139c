"""
Lookup tables for RYM2612 preset conversion.
"""

from typing import Tuple

# Carrier operators per algorithm, indexed [algorithm][operator]
CARRIERS: Tuple[Tuple[bool, ...], ...] = (
    (False, False, False, True),  # 0: 1>2>3>4
    (False, False, False, True),  # 1: (1+2)>3>4
    (False, False, False, True),  # 2: (1+(2>3))>4
    (False, False, False, True),  # 3: ((1>2)+3)>4
    (False, True, False, True),  # 4: (1>2)+(3>4)
    (False, True, True, True),  # 5: 1>(2+3+4)
    (False, True, True, True),  # 6: (1>2)+3+4
    (True, True, True, True),  # 7: 1+2+3+4
)

# RYM2612 MUL parameter value for each OPN multiple (0-15)
MULTIPLE_VALUES: Tuple[int, ...] = (
    0,
    1054,
    1581,
    2635,
    3689,
    4743,
    5797,
    6851,
    7905,
    8959,
    10013,
    10540,
    11594,
    12648,
    14229,
    15000,
)


def is_carrier(algorithm: int, op: int) -> bool:
    """Check if an operator is an output stage for the given algorithm."""
    return CARRIERS[algorithm][op]
