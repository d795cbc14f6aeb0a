from __future__ import annotations

import math
from numbers import Real
from typing import ClassVar, Dict, Optional, Type

from ..channels import Angle, Channel, Deg, F32, F64
from ..conversions import hsv_to_unit_rgb
from ..errors import InvalidChannelValue
from ..spaces import ColorSpaceTag, LinearSpace, SRGBSpace
from .base_color import BASE_HSV, BaseColor
from .color_base import ColorBase, build_class


class HSVColor(ColorBase):
    """
    Hue, saturation, value.

    The constructor validates its input and always returns a normal color:
    black is ``(0, 0, 0)`` and a grey has hue zero. Use ``raw`` to hold
    arbitrary values and ``normalize`` to fix them up later.

    Raises:
        InvalidChannelValue: If ``s`` or ``v`` is outside the channel range or
            not finite, or if ``h`` is not finite.
    """

    __slots__ = ()

    num_channels = 3
    channel_names = ("h", "s", "v")
    hue: ClassVar[Type[Angle]]
    channel: ClassVar[Type[Channel]]
    space: ClassVar[Type[ColorSpaceTag]]

    def __init__(self, h, s, v):
        if isinstance(h, Angle):
            h = self.hue.to_range(h)
        elif not isinstance(h, Real) or not math.isfinite(h):
            raise InvalidChannelValue("hue", h)
        self._check_channel("saturation", s)
        self._check_channel("value", v)
        self._set_value(self._normalized((h, s, v)))

    @classmethod
    def _check_channel(cls, name: str, value) -> None:
        if not isinstance(value, Real) or not cls.channel.in_range(value):
            raise InvalidChannelValue(
                name, value,
                f"{name} must lie in [{cls.channel.ch_zero()}, {cls.channel.ch_max()}], got {value!r}",
            )

    @classmethod
    def raw(cls, h, s, v):
        return cls._from_value((h, s, v))

    @classmethod
    def from_base(cls, base: BaseColor):
        if cls.space is LinearSpace:
            from .rgb import rgb_class
            return rgb_class(F64, LinearSpace).from_base(base).hsv(cls.hue).conv(cls.hue, cls.channel)
        h, s, v = BASE_HSV[BaseColor(base)]
        ch = cls.channel
        return cls(Deg.conv(h, cls.hue), F64.conv(s, ch), F64.conv(v, ch))

    @property
    def h(self):
        return self._value[0]

    @property
    def s(self):
        return self._value[1]

    @property
    def v(self):
        return self._value[2]

    # ------------------ NORMALIZATION ------------------
    @classmethod
    def _normalized(cls, value):
        h, s, v = value
        ch, hue = cls.channel, cls.hue
        h, s, v = hue.to_range(h), ch.to_range(s), ch.to_range(v)
        zero, zero_hue = ch.ch_zero(), hue(hue.zero_angle())
        if v == zero:
            return (zero_hue, zero, zero)
        if s == zero:
            return (zero_hue, zero, v)
        return (h, s, v)

    def normalize(self):
        return type(self)._from_value(self._normalized(self._value))

    def is_normal(self) -> bool:
        h, s, v = self._value
        ch, hue = self.channel, self.hue
        if not (hue.in_range(h) and ch.in_range(s) and ch.in_range(v)):
            return False
        zero = ch.ch_zero()
        if v == zero:
            return h == hue.zero_angle() and s == zero
        if s == zero:
            return h == hue.zero_angle()
        return True

    # ------------------ CONVERSIONS ------------------
    def rgb(self):
        """RGB of the normalized color, same channel kind and space."""
        from .rgb import rgb_class  # local import to avoid cycles

        h, s, v = self._normalized(self._value)
        ch = self.channel
        r, g, b = hsv_to_unit_rgb(float(self.hue.conv(h, Deg)), ch.fraction(s), ch.fraction(v))
        return rgb_class(ch, self.space)(*(F64.conv(c, ch) for c in (r, g, b)))

    def conv(self, hue: Type[Angle], channel: Optional[Type[Channel]] = None):
        """Rescale the hue into ``hue`` units and the other channels into ``channel``."""
        channel = channel or self.channel
        h, s, v = self._normalized(self._value)
        target = hsv_class(hue, channel, self.space)
        return target._from_value(target._normalized((
            self.hue.conv(h, hue),
            self.channel.conv(s, channel),
            self.channel.conv(v, channel),
        )))

    def __str__(self) -> str:
        h, s, v = self._value
        fraction = self.channel.fraction
        return "{:>5.1f}°,{:>5.1f}%,{:>5.1f}%".format(
            float(self.hue.conv(h, Deg)), fraction(s) * 100, fraction(v) * 100
        )


_HSV_CLASSES: Dict[tuple, type] = {}


def hsv_class(
    hue: Type[Angle],
    channel: Type[Channel],
    space: Type[ColorSpaceTag],
    name: Optional[str] = None,
):
    """The HSV color class for hue kind ``hue`` and ``channel`` values in ``space``."""
    return build_class(
        _HSV_CLASSES,
        (hue, channel, space),
        name or f"HSVColor[{hue.__name__}, {channel.__name__}, {space.name}]",
        (HSVColor,),
        {"hue": hue, "channel": channel, "space": space},
    )


StdHSVColor = hsv_class(Deg, F32, SRGBSpace, "StdHSVColor")
LinHSVColor = hsv_class(Deg, F32, LinearSpace, "LinHSVColor")
