"""
Named shades
============

Classify a color into weighted ``BaseColor`` shades, the way a person would
name it: "mostly orange-red", "dark grey", and so on::

    >>> SRGB24Color(255, 0, 0).shades()
    [(<BaseColor.RED: 'red'>, 1.0)]

Hue shades fall off linearly within ``hue_margin`` degrees of their reference
hue; black, white and grey are switched on by luminance and saturation cutoffs.
Weights are normalized to sum to one and sorted heaviest first.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Tuple

from .channels import Deg, F64
from .colors.base_color import BaseColor
from .colors.rgb import RGBColor
from .spaces import LinearSpace

logger = logging.getLogger(__name__)

Shades = List[Tuple[BaseColor, float]]


@dataclass(frozen=True)
class ShadeThresholds:
    """Cutoffs of the shade classifier. Luminances are linear-light, saturations HSV."""

    hue_margin: float = 45.0
    black_cutoff_luminance: float = 0.005
    greyscale_saturation: float = 0.05
    black_luminance: float = 0.045
    white_saturation: float = 0.35
    white_luminance: float = 0.40
    grey_saturation: float = 0.45
    grey_luminance_min: float = 0.03
    grey_luminance_max: float = 0.80


DEFAULT_SHADE_THRESHOLDS = ShadeThresholds()

# reference hues in degrees; red is handled on its own around the 0/360 seam
COLOR_HUES: Tuple[Tuple[BaseColor, float], ...] = (
    (BaseColor.YELLOW, 60.0),
    (BaseColor.GREEN, 120.0),
    (BaseColor.CYAN, 180.0),
    (BaseColor.BLUE, 240.0),
    (BaseColor.MAGENTA, 300.0),
)


def red_weight(hue: float, margin: float):
    """
    Weight of red at ``hue`` degrees, or None outside ``margin`` of the seam.

    Above the seam the weight falls off as ``1 - hue / margin``. Below it the
    same formula runs on ``hue - 360``, so a hue just under 360 weighs more
    than one: ``red_weight(340.0, 45.0)`` is ``1 + 20 / 45``.
    """
    if hue <= margin:
        return 1.0 - hue / margin
    if hue >= Deg.full - margin:
        return 1.0 - (hue - Deg.full) / margin
    return None


def _hue_shades(hue: float, margin: float) -> Shades:
    found = []
    red = red_weight(hue, margin)
    if red is not None:
        found.append((BaseColor.RED, red))
    for base, ref in COLOR_HUES:
        dist = abs(hue - ref)
        if dist <= margin:
            found.append((base, 1.0 - dist / margin))
    return found


def shades(color: RGBColor, thresholds: ShadeThresholds = DEFAULT_SHADE_THRESHOLDS) -> Shades:
    """
    Weighted base colors describing ``color``.

    Args:
        color: Any RGB color; linear colors are gamma encoded first.
        thresholds: Classifier cutoffs.

    Returns:
        ``(BaseColor, weight)`` pairs, weights summing to one, heaviest first.
    """
    if not isinstance(color, RGBColor):
        raise TypeError(f"shades needs an RGB color, got {type(color).__name__}")

    srgb = color.conv(F64)
    if srgb.space is LinearSpace:
        srgb = srgb.std_encode()
    hsv = srgb.hsv(Deg)
    hue, saturation = float(hsv.h), hsv.s
    luminance = srgb.std_decode().relative_luminance()

    t = thresholds
    if luminance < t.black_cutoff_luminance:
        found = [(BaseColor.BLACK, 1.0)]
        logger.debug("shades of %s: %s", color, found)
        return found

    found: Shades = []
    if saturation > t.greyscale_saturation:
        found.extend(_hue_shades(hue, t.hue_margin))

    if luminance <= t.black_luminance:
        found.append((BaseColor.BLACK, 1.0))
    elif luminance >= t.white_luminance and saturation <= t.white_saturation:
        found.append((BaseColor.WHITE, 1.0))
    if saturation <= t.grey_saturation and t.grey_luminance_min <= luminance <= t.grey_luminance_max:
        found.append((BaseColor.GREY, 1.0))

    total = sum(weight for _, weight in found)
    if total > 0:
        found = [(base, weight / total) for base, weight in found]
    found.sort(key=lambda item: item[1], reverse=True)

    logger.debug("shades of %s (h=%.1f s=%.3f lum=%.4f): %s", color, hue, saturation, luminance, found)
    return found
