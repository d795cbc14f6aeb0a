"""
RGB colors
==========

One class exists per ``(channel kind, color space)`` pair, created on demand by
``rgb_class``. The space is part of the type: arithmetic, blending and
luminance only exist on linear classes, gamma decoding only on sRGB classes::

    >>> c = SRGB24Color(255, 128, 0)
    >>> format(c, "X")
    'FF8000'
    >>> c.conv(F32)
    SRGBColor(r=1.0, g=0.5019607843137255, b=0.0)
    >>> lin = c.conv(F32).std_decode()
    >>> lin * 0.5 + lin * 0.5 == lin
    True
"""

from __future__ import annotations

import logging
from typing import Callable, ClassVar, Dict, Optional, Type

import numpy as np

from ..channels import Angle, Channel, Deg, F32, F64, U8, U16
from ..conversions import std_gamma_decode, std_gamma_encode, unit_rgb_to_hsv
from ..errors import HexParseError
from ..spaces import ColorSpaceTag, LinearSpace, SRGBSpace
from ..types.color_types import RGBTuple
from .base_color import BASE_RGB_LEVELS, BaseColor
from .color_base import ColorBase, build_class

logger = logging.getLogger(__name__)

HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

LUMINANCE_WEIGHTS = (0.2126, 0.7152, 0.0722)

_DISPLAY_FORMATS: Dict[Type[Channel], str] = {
    U8: "{:3}, {:3}, {:3}",
    U16: "{:5},{:5},{:5}",
}


class RGBColor(ColorBase):
    __slots__ = ()

    num_channels = 3
    channel_names = ("r", "g", "b")
    channel: ClassVar[Type[Channel]]
    space: ClassVar[Type[ColorSpaceTag]]

    def __init__(self, r, g, b):
        to_range = self.channel.to_range
        self._set_value((to_range(r), to_range(g), to_range(b)))

    @classmethod
    def raw(cls, r, g, b):
        """Build a color without clamping; call ``normalize`` to bring it back in range."""
        return cls._from_value((r, g, b))

    @classmethod
    def from_tuple(cls, values):
        values = tuple(values)
        cls._check_arity(values)
        return cls(*values)

    @classmethod
    def from_array(cls, array):
        """Build a color from a length-3 array of channel values (clamped)."""
        array = np.asarray(array)
        if array.shape != (3,):
            raise TypeError(f"{cls.__name__}.from_array expects shape (3,), got {array.shape}")
        return cls(*array.tolist())

    @classmethod
    def from_base(cls, base: BaseColor):
        """The named reference color in this class's channel kind and space."""
        if cls.space is LinearSpace:
            return rgb_class(F64, SRGBSpace).from_base(base).std_decode().conv(cls.channel)
        ch = cls.channel
        levels = {0.0: ch.ch_zero(), 0.5: ch.ch_mid(), 1.0: ch.ch_max()}
        return cls(*(levels[level] for level in BASE_RGB_LEVELS[BaseColor(base)]))

    # ------------------ HEX ------------------
    @classmethod
    def _require_8bit(cls, operation: str) -> None:
        if cls.channel is not U8:
            raise TypeError(f"{operation} is only available on 8-bit colors, not {cls.__name__}")

    @classmethod
    def parse_hex(cls, text: str):
        """
        Parse ``#RRGGBB``, ``RRGGBB``, ``#RGB`` or ``RGB`` (any case).

        Raises:
            HexParseError: If ``text`` is not 3 or 6 hex digits after an optional ``#``.
        """
        cls._require_8bit("parse_hex")
        if not isinstance(text, str):
            raise HexParseError(text, "expected a string")
        digits = text[1:] if text.startswith("#") else text
        if len(digits) not in (3, 6):
            raise HexParseError(text, f"expected 3 or 6 hex digits, got {len(digits)}")
        if not all(d in HEX_DIGITS for d in digits):
            raise HexParseError(text, "contains a non-hex character")
        if len(digits) == 3:
            digits = "".join(d * 2 for d in digits)
        return cls(*(int(digits[i:i + 2], 16) for i in (0, 2, 4)))

    @classmethod
    def from_hex(cls, text: str):
        """Like ``parse_hex`` but returns None for malformed input."""
        try:
            return cls.parse_hex(text)
        except HexParseError as exc:
            logger.debug("rejected hex color: %s", exc)
            return None

    # ------------------ ACCESSORS ------------------
    @property
    def r(self):
        return self._value[0]

    @property
    def g(self):
        return self._value[1]

    @property
    def b(self):
        return self._value[2]

    def array(self, dtype=None) -> np.ndarray:
        """Clamped channels as a numpy array of the channel dtype."""
        return np.array(self.normalize().tuple(), dtype=dtype or self.channel.dtype)

    def fractions(self) -> RGBTuple:
        """Channels as floats in ``[0, 1]``."""
        fraction = self.channel.fraction
        return tuple(fraction(c) for c in self._value)

    # ------------------ NORMALIZATION ------------------
    def normalize(self):
        return type(self)(*self._value)

    def is_normal(self) -> bool:
        return all(self.channel.in_range(c) for c in self._value)

    # ------------------ CONVERSIONS ------------------
    def map(self, fun: Callable, channel: Optional[Type[Channel]] = None):
        """Apply ``fun`` to every channel; the result is built raw, in the same space."""
        target = rgb_class(channel or self.channel, self.space)
        return target.raw(*(fun(c) for c in self._value))

    def conv(self, channel: Type[Channel]):
        """Rescale every channel into ``channel``'s range."""
        if channel is self.channel:
            return self.normalize()
        conv = self.channel.conv
        return rgb_class(channel, self.space)(*(conv(c, channel) for c in self._value))

    def hsv(self, hue: Type[Angle] = Deg):
        """HSV of this color, same channel kind and space, hue in ``hue`` units."""
        from .hsv import hsv_class  # local import to avoid cycles

        h, s, v = unit_rgb_to_hsv(*self.fractions())
        ch = self.channel
        return hsv_class(hue, ch, self.space)(
            Deg.conv(h, hue),
            F64.conv(s, ch),
            F64.conv(v, ch),
        )

    def srgb(self):
        """Float32 gamma-encoded color."""
        color = self.conv(F32)
        return color if self.space is SRGBSpace else color.std_encode()

    def srgb24(self):
        """8-bit gamma-encoded color."""
        return self.srgb().conv(U8)

    def lin_rgb(self):
        """Float32 linear color."""
        color = self.conv(F32)
        return color if self.space is LinearSpace else color.std_decode()

    def lin_rgb48(self):
        """16-bit linear color."""
        return self.lin_rgb().conv(U16)

    def shades(self, thresholds=None):
        from ..shades import DEFAULT_SHADE_THRESHOLDS, shades
        return shades(self, thresholds or DEFAULT_SHADE_THRESHOLDS)

    # ------------------ DISPLAY ------------------
    def __str__(self) -> str:
        template = _DISPLAY_FORMATS.get(self.channel)
        if template is None:
            template = "{}, {}, {}" if self.channel.integral else "{:5.1f},{:5.1f},{:5.1f}"
        return template.format(*self._value)

    def __format__(self, format_spec: str) -> str:
        if format_spec in ("X", "x"):
            if self.channel is not U8:
                raise ValueError(f"hex formatting needs an 8-bit color, not {type(self).__name__}")
            return "".join(format(c, "02" + format_spec) for c in self.normalize().tuple())
        if not format_spec:
            return str(self)
        raise ValueError(f"Unknown format code {format_spec!r} for {type(self).__name__}")


class GammaEncodedRGB:
    """Operations of gamma-encoded (sRGB) colors."""

    __slots__ = ()

    def std_decode(self):
        """Linear-light color through the standard sRGB curve, same channel kind."""
        ch = self.channel
        target = rgb_class(ch, LinearSpace)
        return target(*(ch.from_fraction(std_gamma_decode(ch.fraction(c))) for c in self._value))


class LinearRGB:
    """Operations that only make sense on linear-light colors."""

    __slots__ = ()

    # set in blend.py
    blend: ClassVar[Callable]

    def std_encode(self):
        """Gamma-encoded color through the standard sRGB curve, same channel kind."""
        ch = self.channel
        target = rgb_class(ch, SRGBSpace)
        return target(*(ch.from_fraction(std_gamma_encode(ch.fraction(c))) for c in self._value))

    def relative_luminance(self):
        """Rec. 709 weighted sum, in this color's channel kind."""
        ch = self.channel
        total = sum(w * f for w, f in zip(LUMINANCE_WEIGHTS, self.fractions()))
        return ch.from_fraction(total)

    # -----------------------
    # Core arithmetic engine
    # -----------------------
    def _operate(self, other, op):
        if isinstance(other, ColorBase):
            if type(other) is not type(self):
                raise TypeError(
                    f"cannot combine {type(self).__name__} with {type(other).__name__}; "
                    "convert one of them first"
                )
            b = np.array(other.tuple(), dtype=float)
        elif isinstance(other, (int, float, np.number)):
            b = float(other)
        else:
            return NotImplemented

        a = np.array(self._value, dtype=float)
        # division by zero and inf - inf land in the clamp below
        with np.errstate(all="ignore"):
            result = op(a, b)

        return type(self)(*result.tolist())

    # -----------------------
    # Operator overloads
    # -----------------------
    def __add__(self, other):
        return self._operate(other, np.add)

    def __sub__(self, other):
        return self._operate(other, np.subtract)

    def __mul__(self, other):
        return self._operate(other, np.multiply)

    def __truediv__(self, other):
        return self._operate(other, np.divide)

    def __rmul__(self, other):
        return self.__mul__(other)

    def __rtruediv__(self, other):
        # other / self
        return self._operate(other, lambda a, b: np.divide(b, a))


_RGB_CLASSES: Dict[tuple, type] = {}


def rgb_class(channel: Type[Channel], space: Type[ColorSpaceTag], name: Optional[str] = None):
    """The RGB color class for ``channel`` values in ``space``."""
    mixin = LinearRGB if space is LinearSpace else GammaEncodedRGB
    return build_class(
        _RGB_CLASSES,
        (channel, space),
        name or f"RGBColor[{channel.__name__}, {space.name}]",
        (mixin, RGBColor),
        {"channel": channel, "space": space},
    )


SRGBColor = rgb_class(F32, SRGBSpace, "SRGBColor")
SRGB24Color = rgb_class(U8, SRGBSpace, "SRGB24Color")
SRGB48Color = rgb_class(U16, SRGBSpace, "SRGB48Color")
LinRGBColor = rgb_class(F32, LinearSpace, "LinRGBColor")
LinRGB48Color = rgb_class(U16, LinearSpace, "LinRGB48Color")
