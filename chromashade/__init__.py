"""Chromashade: typed color channels, sRGB/linear/HSV conversions and named shades."""

__version__ = "0.1.0"

from .errors import ChromashadeError, InvalidChannelValue, HexParseError
from .spaces import ColorSpaceTag, SRGBSpace, LinearSpace
from .channels import (
    Channel,
    U8,
    U16,
    U32,
    U64,
    F32,
    F64,
    Angle,
    Deg,
    Rad,
    Rev,
    Rev8,
    Rev16,
)
from .colors import (
    ColorBase,
    BaseColor,
    RGBColor,
    rgb_class,
    SRGBColor,
    SRGB24Color,
    SRGB48Color,
    LinRGBColor,
    LinRGB48Color,
    HSVColor,
    hsv_class,
    StdHSVColor,
    LinHSVColor,
    Alpha,
    alpha_class,
    SRGBAColor,
    SRGBA32Color,
    LinRGBAColor,
    LinRGBA64Color,
)
from .conversions import (
    std_gamma_encode,
    std_gamma_decode,
    np_std_gamma_encode,
    np_std_gamma_decode,
    unit_rgb_to_hsv,
    hsv_to_unit_rgb,
    np_unit_rgb_to_hsv,
    np_hsv_to_unit_rgb,
)
from .shades import ShadeThresholds, DEFAULT_SHADE_THRESHOLDS, shades

__all__ = [
    # errors
    "ChromashadeError",
    "InvalidChannelValue",
    "HexParseError",
    # spaces and channels
    "ColorSpaceTag",
    "SRGBSpace",
    "LinearSpace",
    "Channel",
    "U8",
    "U16",
    "U32",
    "U64",
    "F32",
    "F64",
    "Angle",
    "Deg",
    "Rad",
    "Rev",
    "Rev8",
    "Rev16",
    # core color types
    "ColorBase",
    "BaseColor",
    "RGBColor",
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
    # conversions
    "std_gamma_encode",
    "std_gamma_decode",
    "np_std_gamma_encode",
    "np_std_gamma_decode",
    "unit_rgb_to_hsv",
    "hsv_to_unit_rgb",
    "np_unit_rgb_to_hsv",
    "np_hsv_to_unit_rgb",
    # shades
    "ShadeThresholds",
    "DEFAULT_SHADE_THRESHOLDS",
    "shades",
]
