from __future__ import annotations

from typing import Callable, ClassVar, Dict, Optional, Type

from ..channels import Angle, Channel, Deg, F32, U8, U16
from ..spaces import ColorSpaceTag, LinearSpace, SRGBSpace
from ..types.color_types import RGBATuple
from .base_color import BaseColor
from .color_base import ColorBase, build_class
from .rgb import rgb_class


class Alpha(ColorBase):
    """
    A color with a straight (non-premultiplied) alpha channel.

    ``Alpha(color, alpha)`` accepts a color of ``color_type``, a plain tuple of
    its channels or a ``BaseColor``. A missing alpha means fully opaque::

        >>> SRGBAColor((2.0, -10.0, float("-inf")), float("inf")).tuple()
        (1.0, 0.0, 0.0, 1.0)
    """

    __slots__ = ()

    color_type: ClassVar[Type[ColorBase]]
    alpha_channel: ClassVar[Type[Channel]]
    space: ClassVar[Type[ColorSpaceTag]]

    # set in blend.py
    blend: ClassVar[Callable]
    alpha_blend: ClassVar[Callable]

    def __init__(self, color, alpha=None):
        color = self._coerce_color(color)
        if alpha is None:
            alpha = self.alpha_channel.ch_max()
        self._set_value((color, self.alpha_channel.to_range(alpha)))

    @classmethod
    def _coerce_color(cls, color):
        if isinstance(color, BaseColor):
            return cls.color_type.from_base(color)
        if isinstance(color, ColorBase):
            if type(color) is not cls.color_type:
                raise TypeError(
                    f"{cls.__name__} holds {cls.color_type.__name__}, not {type(color).__name__}"
                )
            return color
        return cls.color_type(*color)

    @classmethod
    def raw(cls, color, alpha):
        """Pair ``color`` and ``alpha`` without clamping either."""
        return cls._from_value((color, alpha))

    @classmethod
    def from_tuple(cls, values):
        """Build from ``(c0, c1, c2, alpha)``."""
        values = tuple(values)
        if len(values) != cls.color_type.num_channels + 1:
            raise TypeError(
                f"{cls.__name__} expects {cls.color_type.num_channels + 1} channels, got {len(values)}"
            )
        return cls(values[:-1], values[-1])

    @classmethod
    def from_hex(cls, text: str):
        """Parse an opaque color from hex; see ``RGBColor.parse_hex``."""
        color = cls.color_type.from_hex(text)
        return None if color is None else cls(color)

    @classmethod
    def parse_hex(cls, text: str):
        return cls(cls.color_type.parse_hex(text))

    @property
    def color(self):
        return self._value[0]

    @property
    def alpha(self):
        return self._value[1]

    def tuple(self) -> RGBATuple:
        return (*self.color.tuple(), self.alpha)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(color={self.color!r}, alpha={self.alpha!r})"

    def __str__(self) -> str:
        return f"{self.color}, {self.alpha}"

    def __format__(self, format_spec: str) -> str:
        if format_spec in ("X", "x"):
            if self.alpha_channel is not U8:
                raise ValueError(f"hex formatting needs an 8-bit alpha, not {type(self).__name__}")
            alpha = self.alpha_channel.to_range(self.alpha)
            return format(self.color, format_spec) + format(alpha, "02" + format_spec)
        if not format_spec:
            return str(self)
        raise ValueError(f"Unknown format code {format_spec!r} for {type(self).__name__}")

    # ------------------ NORMALIZATION ------------------
    def normalize(self):
        return type(self)._from_value((self.color.normalize(), self.alpha_channel.to_range(self.alpha)))

    def is_normal(self) -> bool:
        return self.color.is_normal() and self.alpha_channel.in_range(self.alpha)

    def with_alpha(self, alpha):
        """The same color with another alpha."""
        return type(self)(self.color, alpha)

    # ------------------ CONVERSIONS ------------------
    def _rewrap(self, color, alpha_channel: Optional[Type[Channel]] = None):
        alpha_channel = alpha_channel or self.alpha_channel
        target = alpha_class(type(color), alpha_channel)
        return target(color, self.alpha_channel.conv(self.alpha, alpha_channel))

    def conv(self, channel: Type[Channel], alpha_channel: Optional[Type[Channel]] = None):
        """Rescale the color into ``channel`` and the alpha into ``alpha_channel`` (default ``channel``)."""
        return self._rewrap(self.color.conv(channel), alpha_channel or channel)

    def hsv(self, hue: Type[Angle] = Deg):
        return self._rewrap(self.color.hsv(hue))

    def rgb(self):
        return self._rewrap(self.color.rgb())

    def std_decode(self):
        return self._rewrap(self.color.std_decode())

    def std_encode(self):
        return self._rewrap(self.color.std_encode())


_ALPHA_CLASSES: Dict[tuple, type] = {}


def alpha_class(
    color_type: Type[ColorBase],
    alpha_channel: Optional[Type[Channel]] = None,
    name: Optional[str] = None,
):
    """The alpha class pairing ``color_type`` with an ``alpha_channel`` value (default: its channel kind)."""
    alpha_channel = alpha_channel or color_type.channel
    return build_class(
        _ALPHA_CLASSES,
        (color_type, alpha_channel),
        name or f"Alpha[{color_type.__name__}, {alpha_channel.__name__}]",
        (Alpha,),
        {
            "color_type": color_type,
            "alpha_channel": alpha_channel,
            "space": color_type.space,
            "num_channels": color_type.num_channels + 1,
            "channel_names": color_type.channel_names + ("alpha",),
        },
    )


SRGBAColor = alpha_class(rgb_class(F32, SRGBSpace), F32, "SRGBAColor")
SRGBA32Color = alpha_class(rgb_class(U8, SRGBSpace), U8, "SRGBA32Color")
LinRGBAColor = alpha_class(rgb_class(F32, LinearSpace), F32, "LinRGBAColor")
LinRGBA64Color = alpha_class(rgb_class(U16, LinearSpace), U16, "LinRGBA64Color")
