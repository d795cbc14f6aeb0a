from typing import Tuple

import numpy as np
from numpy import ndarray

HUE_SECTOR = 60.0


def unit_rgb_to_hsv(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Convert an RGB triple of fractions (0..1) to HSV.

    When two channels tie for the maximum, the first of red, green, blue wins.

    Returns:
        (hue in degrees [0, 360], saturation [0, 1], value [0, 1]). A hue of
        exactly 360 can come out of float rounding; callers wrap it.
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    value = max_c
    saturation = 0.0 if max_c == 0 else delta / max_c

    if delta == 0:
        hue = 0.0
    elif max_c == r:
        hue = ((g - b) / delta) % 6.0
    elif max_c == g:
        hue = (b - r) / delta + 2.0
    else:
        hue = (r - g) / delta + 4.0

    return HUE_SECTOR * hue, saturation, value


def np_unit_rgb_to_hsv(r: ndarray, g: ndarray, b: ndarray) -> ndarray:
    """
    Vectorized RGB (0..1) to HSV.

    Args:
        r, g, b: array-like or scalar, channel fractions

    Returns:
        hsv: array of shape (..., 3): (hue [0,360], saturation [0,1], value [0,1])
    """
    r = np.asarray(r, dtype=np.float64)
    g = np.asarray(g, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    r, g, b = np.broadcast_arrays(r, g, b)

    max_c = np.maximum(np.maximum(r, g), b)
    min_c = np.minimum(np.minimum(r, g), b)
    delta = max_c - min_c

    with np.errstate(divide="ignore", invalid="ignore"):
        saturation = np.where(max_c == 0, 0.0, delta / max_c)
        hue_r = np.mod((g - b) / delta, 6.0)
        hue_g = (b - r) / delta + 2.0
        hue_b = (r - g) / delta + 4.0

    # nested where keeps the r -> g -> b tie-break of the scalar version
    hue = np.where(
        delta == 0,
        0.0,
        np.where(max_c == r, hue_r, np.where(max_c == g, hue_g, hue_b)),
    )
    return np.stack([HUE_SECTOR * hue, saturation, max_c], axis=-1)
