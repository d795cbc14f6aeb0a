from .color_base import ColorBase
from .base_color import BaseColor
from .rgb import (
    RGBColor,
    GammaEncodedRGB,
    LinearRGB,
    rgb_class,
    SRGBColor,
    SRGB24Color,
    SRGB48Color,
    LinRGBColor,
    LinRGB48Color,
)
from .hsv import HSVColor, hsv_class, StdHSVColor, LinHSVColor
from .alpha import Alpha, alpha_class, SRGBAColor, SRGBA32Color, LinRGBAColor, LinRGBA64Color
from .blend import blend, alpha_blend

__all__ = [
    "ColorBase",
    "BaseColor",
    "RGBColor",
    "GammaEncodedRGB",
    "LinearRGB",
    "rgb_class",
    "SRGBColor",
    "SRGB24Color",
    "SRGB48Color",
    "LinRGBColor",
    "LinRGB48Color",
    "HSVColor",
    "hsv_class",
    "StdHSVColor",
    "LinHSVColor",
    "Alpha",
    "alpha_class",
    "SRGBAColor",
    "SRGBA32Color",
    "LinRGBAColor",
    "LinRGBA64Color",
    "blend",
    "alpha_blend",
]
