from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple


class BaseColor(str, Enum):
    """The fixed reference colors named by the shade classifier."""

    BLACK = "black"
    GREY = "grey"
    WHITE = "white"
    RED = "red"
    YELLOW = "yellow"
    GREEN = "green"
    CYAN = "cyan"
    BLUE = "blue"
    MAGENTA = "magenta"

    def __str__(self) -> str:
        return self.value

    def srgb24(self):
        from .rgb import SRGB24Color
        return SRGB24Color.from_base(self)

    def srgb(self):
        from .rgb import SRGBColor
        return SRGBColor.from_base(self)

    def lin_rgb(self):
        from .rgb import LinRGBColor
        return LinRGBColor.from_base(self)

    def lin_rgb48(self):
        from .rgb import LinRGB48Color
        return LinRGB48Color.from_base(self)

    def hsv(self, hue=None):
        """Gamma-encoded float HSV of this color, hue in ``hue`` (``Deg`` by default)."""
        from ..channels import Deg, F32
        from ..spaces import SRGBSpace
        from .hsv import hsv_class
        return hsv_class(hue or Deg, F32, SRGBSpace).from_base(self)


# channel levels of the gamma-encoded base colors: 0.0 -> zero, 0.5 -> mid, 1.0 -> max
BASE_RGB_LEVELS: Dict[BaseColor, Tuple[float, float, float]] = {
    BaseColor.BLACK: (0.0, 0.0, 0.0),
    BaseColor.GREY: (0.5, 0.5, 0.5),
    BaseColor.WHITE: (1.0, 1.0, 1.0),
    BaseColor.RED: (1.0, 0.0, 0.0),
    BaseColor.YELLOW: (1.0, 1.0, 0.0),
    BaseColor.GREEN: (0.0, 1.0, 0.0),
    BaseColor.CYAN: (0.0, 1.0, 1.0),
    BaseColor.BLUE: (0.0, 0.0, 1.0),
    BaseColor.MAGENTA: (1.0, 0.0, 1.0),
}

# (hue in degrees, saturation, value) of the gamma-encoded base colors
BASE_HSV: Dict[BaseColor, Tuple[float, float, float]] = {
    BaseColor.BLACK: (0.0, 0.0, 0.0),
    BaseColor.GREY: (0.0, 0.0, 0.5),
    BaseColor.WHITE: (0.0, 0.0, 1.0),
    BaseColor.RED: (0.0, 1.0, 1.0),
    BaseColor.YELLOW: (60.0, 1.0, 1.0),
    BaseColor.GREEN: (120.0, 1.0, 1.0),
    BaseColor.CYAN: (180.0, 1.0, 1.0),
    BaseColor.BLUE: (240.0, 1.0, 1.0),
    BaseColor.MAGENTA: (300.0, 1.0, 1.0),
}
