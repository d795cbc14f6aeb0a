import math
from typing import Tuple

import numpy as np
from numpy import ndarray

from ..errors import InvalidChannelValue
from .to_hsv import HUE_SECTOR


def hsv_to_unit_rgb(h: float, s: float, v: float) -> Tuple[float, float, float]:
    """
    Convert HSV to an RGB triple of fractions.

    Args:
        h: hue in degrees, already wrapped into [0, 360)
        s: saturation (0..1)
        v: value (0..1)

    Raises:
        InvalidChannelValue: if the hue does not fall into one of the six sectors.
    """
    h = h / HUE_SECTOR

    # largest, second largest and the smallest component
    c = s * v
    x = c * (1.0 - abs(math.fmod(h, 2.0) - 1.0))
    m = v - c

    sector = int(h)
    if sector == 0:
        r, g, b = c, x, 0.0
    elif sector == 1:
        r, g, b = x, c, 0.0
    elif sector == 2:
        r, g, b = 0.0, c, x
    elif sector == 3:
        r, g, b = 0.0, x, c
    elif sector == 4:
        r, g, b = x, 0.0, c
    elif sector in (5, 6):
        r, g, b = c, 0.0, x
    else:
        raise InvalidChannelValue("hue", h * HUE_SECTOR)

    return r + m, g + m, b + m


def np_hsv_to_unit_rgb(h: ndarray, s: ndarray, v: ndarray) -> ndarray:
    """
    Vectorized HSV to RGB (0..1).

    Hues are wrapped into [0, 360) first, so any finite hue is accepted.

    Returns:
        rgb: array of shape (..., 3)
    """
    h = np.mod(np.asarray(h, dtype=np.float64), 360.0) / HUE_SECTOR
    s = np.asarray(s, dtype=np.float64)
    v = np.asarray(v, dtype=np.float64)
    h, s, v = np.broadcast_arrays(h, s, v)

    c = s * v
    x = c * (1.0 - np.abs(np.mod(h, 2.0) - 1.0))
    m = v - c
    zero = np.zeros_like(c)

    sector = np.minimum(np.floor(h).astype(np.int64), 5)
    r = np.choose(sector, [c, x, zero, zero, x, c])
    g = np.choose(sector, [x, c, c, x, zero, zero])
    b = np.choose(sector, [zero, zero, x, c, c, x])

    return np.stack([r + m, g + m, b + m], axis=-1)
