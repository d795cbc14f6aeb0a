"""
Angle kinds for hue channels.

Every operation on an angle immediately wraps the result, so an angle value can
never sit outside ``[zero_angle, full_angle)``::

    >>> Deg(-90)
    Deg(270.0)
    >>> Deg(350) + Deg(20)
    Deg(10.0)
    >>> F32.conv(0.25, Deg)
    Deg(90.0)

Integer revolutions (``Rev8``, ``Rev16``) behave like fixed-width unsigned
integers where one full turn is ``2**bits``: they wrap through overflow and
``wrap`` has nothing left to do.
"""

from __future__ import annotations

import math
from typing import ClassVar

import numpy as np
from boundednumbers.functions import cyclic_wrap_float
from numpy import ndarray

from ..errors import InvalidChannelValue
from ..types.color_types import Scalar
from ..utils.num_utils import np_round_half_up, round_half_up
from .channel import Channel


class Angle(Channel):
    """Channel interface for circular quantities.

    ``ch_max`` of an angle kind is its full turn, which is itself out of range:
    ``to_range`` wraps instead of clamping.

    Dividing an angle by zero, or taking it modulo zero, raises
    ``InvalidChannelValue`` just as a non-finite result does.
    """

    full: ClassVar[Scalar]
    zero: ClassVar[Scalar] = 0

    @classmethod
    def full_angle(cls) -> Scalar:
        return cls.full

    @classmethod
    def zero_angle(cls) -> Scalar:
        return cls.zero

    @classmethod
    def ch_max(cls) -> Scalar:
        return cls.full

    @classmethod
    def ch_zero(cls) -> Scalar:
        return cls.zero

    @classmethod
    def ch_mid(cls):
        return cls(cls.zero + (cls.full - cls.zero) / 2)

    @classmethod
    def to_range(cls, value):
        """Wrap ``value`` into range; non-finite input becomes the zero angle."""
        if isinstance(value, Angle) and type(value) is not cls:
            return type(value).conv(value, cls)
        if not isinstance(value, (int, np.integer)) and not math.isfinite(float(value)):
            return cls(cls.zero)
        return cls(value)

    @classmethod
    def in_range(cls, value) -> bool:
        try:
            return cls.zero <= value < cls.full
        except TypeError:
            return False

    @classmethod
    def fraction(cls, value) -> float:
        return float(cls.to_range(value) - cls.zero) / float(cls.full - cls.zero)

    @classmethod
    def np_fraction(cls, values: ndarray) -> ndarray:
        arr = np.nan_to_num(np.asarray(values, dtype=np.float64), nan=0.0, posinf=0.0, neginf=0.0)
        span = float(cls.full - cls.zero)
        return np.mod(arr - cls.zero, span) / span

    def wrap(self):
        return type(self)(self)

    def _coerce_other(self, other):
        # angles of another kind are converted before any arithmetic
        if isinstance(other, Angle) and type(other) is not type(self):
            return type(other).conv(other, type(self))
        return other

    def _divisor(self, other):
        other = self._coerce_other(other)
        if other == 0:
            raise InvalidChannelValue(type(self).__name__, other, f"{type(self).__name__} division by zero")
        return other


class FloatAngle(float, Angle):
    def __new__(cls, value: Scalar = 0.0):
        value = float(value)
        if not math.isfinite(value):
            raise InvalidChannelValue(cls.__name__, value, f"{cls.__name__} must be finite, got {value!r}")
        return super().__new__(cls, cls._wrap_value(value))

    @classmethod
    def _wrap_value(cls, value: float) -> float:
        lo, hi = float(cls.zero), float(cls.full)
        wrapped = float(cyclic_wrap_float(value, lo, hi))
        # tiny negative remainders round up to the full turn
        if wrapped >= hi:
            wrapped -= hi - lo
        if wrapped < lo:
            wrapped = lo
        return wrapped

    @classmethod
    def from_fraction(cls, fraction: float):
        return cls.to_range(cls.zero + fraction * (cls.full - cls.zero))

    @classmethod
    def np_from_fraction(cls, fractions: ndarray) -> ndarray:
        span = float(cls.full - cls.zero)
        scaled = np.asarray(fractions, dtype=np.float64) * span
        return (np.mod(scaled, span) + cls.zero).astype(cls.dtype)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({float(self)!r})"

    def __str__(self) -> str:
        return str(float(self))

    def __add__(self, other):
        return type(self)(float(self) + float(self._coerce_other(other)))

    def __radd__(self, other):
        return type(self)(float(other) + float(self))

    def __sub__(self, other):
        return type(self)(float(self) - float(self._coerce_other(other)))

    def __rsub__(self, other):
        return type(self)(float(other) - float(self))

    def __mul__(self, other):
        return type(self)(float(self) * float(self._coerce_other(other)))

    def __rmul__(self, other):
        return type(self)(float(other) * float(self))

    def __truediv__(self, other):
        return type(self)(float(self) / float(self._divisor(other)))

    def __rtruediv__(self, other):
        return type(self)(float(other) / float(self._divisor(self)))

    def __mod__(self, other):
        return type(self)(math.fmod(float(self), float(self._divisor(other))))

    def __neg__(self):
        return type(self)(-float(self))


class IntAngle(int, Angle):
    integral: ClassVar[bool] = True

    def __new__(cls, value: Scalar = 0):
        if not isinstance(value, (int, np.integer)):
            value = float(value)
            if not math.isfinite(value):
                raise InvalidChannelValue(cls.__name__, value, f"{cls.__name__} must be finite, got {value!r}")
            value = round_half_up(value)
        return super().__new__(cls, int(value) % cls.full)

    @classmethod
    def ch_mid(cls):
        return cls(cls.full // 2)

    @classmethod
    def from_fraction(cls, fraction: float):
        return cls.to_range(round_half_up(fraction * cls.full))

    @classmethod
    def np_from_fraction(cls, fractions: ndarray) -> ndarray:
        scaled = np_round_half_up(np.asarray(fractions, dtype=np.float64) * cls.full)
        return np.mod(scaled, cls.full).astype(cls.dtype)

    def wrap(self):
        # overflow already wrapped the value on construction
        return self

    def _divisor(self, other):
        # the divisor is truncated first, so 0.4 counts as zero
        return super()._divisor(int(self._coerce_other(other)))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({int(self)})"

    def __str__(self) -> str:
        return str(int(self))

    def __add__(self, other):
        return type(self)(int(self) + int(self._coerce_other(other)))

    def __radd__(self, other):
        return type(self)(int(other) + int(self))

    def __sub__(self, other):
        return type(self)(int(self) - int(self._coerce_other(other)))

    def __rsub__(self, other):
        return type(self)(int(other) - int(self))

    def __mul__(self, other):
        return type(self)(int(self) * int(self._coerce_other(other)))

    def __rmul__(self, other):
        return type(self)(int(other) * int(self))

    def __truediv__(self, other):
        return type(self)(int(self) // int(self._divisor(other)))

    __floordiv__ = __truediv__

    def __mod__(self, other):
        return type(self)(int(self) % int(self._divisor(other)))

    def __neg__(self):
        return type(self)(-int(self))


class Deg(FloatAngle):
    """Angle in degrees, ``[0, 360)``."""
    full = 360.0
    zero = 0.0


class Rad(FloatAngle):
    """Angle in radians, ``[0, 2π)``."""
    full = math.tau
    zero = 0.0


class Rev(FloatAngle):
    """Angle in revolutions, ``[0, 1)``."""
    full = 1.0
    zero = 0.0


class Rev8(IntAngle):
    """One turn is 256 steps."""
    dtype = np.uint8
    full = 256


class Rev16(IntAngle):
    """One turn is 65536 steps."""
    dtype = np.uint16
    full = 65536


ANGLE_KINDS = (Deg, Rad, Rev, Rev8, Rev16)
