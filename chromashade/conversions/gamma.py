"""sRGB transfer function, scalar and vectorized."""

import numpy as np
from numpy import ndarray

# The sRGB gamma value, used for sRGB decoding and encoding
STD_GAMMA = 2.4

# linear values at or below this are encoded with the straight segment
SRGB_CUTOFF = 0.0031308

# encoded values at or below this are decoded with the straight segment
SRGB_INV_CUTOFF = 0.04045

LINEAR_SLOPE = 12.92
SRGB_OFFSET = 0.055
SRGB_SCALE = 1.055


def std_gamma_encode(linear: float) -> float:
    """Gamma encode a linear channel value (0..1) into the sRGB space."""
    if linear <= SRGB_CUTOFF:
        return linear * LINEAR_SLOPE
    return linear ** (1.0 / STD_GAMMA) * SRGB_SCALE - SRGB_OFFSET


def std_gamma_decode(encoded: float) -> float:
    """Gamma decode an sRGB channel value (0..1) into the linear space."""
    if encoded <= SRGB_INV_CUTOFF:
        return encoded / LINEAR_SLOPE
    return ((encoded + SRGB_OFFSET) / SRGB_SCALE) ** STD_GAMMA


def np_std_gamma_encode(linear: ndarray) -> ndarray:
    """Vectorized: gamma encode linear values (0..1) into sRGB."""
    linear = np.asarray(linear, dtype=np.float64)
    # negative values would make the power NaN; they take the straight segment anyway
    safe = np.maximum(linear, 0.0)
    return np.where(
        linear <= SRGB_CUTOFF,
        linear * LINEAR_SLOPE,
        safe ** (1.0 / STD_GAMMA) * SRGB_SCALE - SRGB_OFFSET,
    )


def np_std_gamma_decode(encoded: ndarray) -> ndarray:
    """Vectorized: gamma decode sRGB values (0..1) into linear light."""
    encoded = np.asarray(encoded, dtype=np.float64)
    safe = np.maximum(encoded, SRGB_INV_CUTOFF)
    return np.where(
        encoded <= SRGB_INV_CUTOFF,
        encoded / LINEAR_SLOPE,
        ((safe + SRGB_OFFSET) / SRGB_SCALE) ** STD_GAMMA,
    )
