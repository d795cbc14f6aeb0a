import math

import numpy as np
from numpy import ndarray


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties away from zero.

    The builtin ``round`` ties to even, which would make 8-bit -> 16-bit -> 8-bit
    conversions drift on exact halves.
    """
    if value >= 0:
        return int(math.floor(value + 0.5))
    return -int(math.floor(-value + 0.5))


def np_round_half_up(values: ndarray) -> ndarray:
    """Vectorized ``round_half_up``; returns floats."""
    values = np.asarray(values, dtype=np.float64)
    return np.sign(values) * np.floor(np.abs(values) + 0.5)
