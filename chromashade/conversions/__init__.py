"""
Chromashade Conversions
=======================

Plain-number conversion algorithms used by the color classes, each with a
vectorized numpy counterpart for batch work.

sRGB transfer function:
    std_gamma_encode / np_std_gamma_encode
        linear light -> gamma-encoded sRGB
    std_gamma_decode / np_std_gamma_decode
        gamma-encoded sRGB -> linear light

RGB <-> HSV (channel fractions 0..1, hue in degrees):
    unit_rgb_to_hsv / np_unit_rgb_to_hsv
    hsv_to_unit_rgb / np_hsv_to_unit_rgb

Examples
--------
>>> from chromashade.conversions import unit_rgb_to_hsv, hsv_to_unit_rgb
>>> unit_rgb_to_hsv(1.0, 0.5, 0.0)
(30.0, 1.0, 1.0)
>>> hsv_to_unit_rgb(30.0, 1.0, 1.0)
(1.0, 0.5, 0.0)
"""

from .gamma import (
    STD_GAMMA,
    SRGB_CUTOFF,
    SRGB_INV_CUTOFF,
    std_gamma_encode,
    std_gamma_decode,
    np_std_gamma_encode,
    np_std_gamma_decode,
)
from .to_hsv import unit_rgb_to_hsv, np_unit_rgb_to_hsv
from .to_rgb import hsv_to_unit_rgb, np_hsv_to_unit_rgb

__all__ = [
    "STD_GAMMA",
    "SRGB_CUTOFF",
    "SRGB_INV_CUTOFF",
    "std_gamma_encode",
    "std_gamma_decode",
    "np_std_gamma_encode",
    "np_std_gamma_decode",
    "unit_rgb_to_hsv",
    "np_unit_rgb_to_hsv",
    "hsv_to_unit_rgb",
    "np_hsv_to_unit_rgb",
]
