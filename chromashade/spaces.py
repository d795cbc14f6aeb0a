"""
Color space tags.

A tag is never instantiated; it only tells two otherwise identical color
classes apart. ``RGBColor`` classes bound to ``SRGBSpace`` hold gamma-encoded
values, classes bound to ``LinearSpace`` hold linear-light values, and the two
only meet through an explicit ``std_decode``/``std_encode`` call.
"""

from typing import ClassVar


class ColorSpaceTag:
    name: ClassVar[str]

    def __new__(cls, *args, **kwargs):
        raise TypeError(f"{cls.__name__} is a type-level tag and cannot be instantiated")


class SRGBSpace(ColorSpaceTag):
    """Gamma-encoded sRGB."""
    name = "srgb"


class LinearSpace(ColorSpaceTag):
    """Linear-light RGB with sRGB primaries."""
    name = "linear"

