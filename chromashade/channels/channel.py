"""
Channel kinds
=============

A channel kind describes the valid range of one numeric color component and
how a value moves from one kind's range into another's. Values themselves stay
plain ``int``/``float``; the kinds are used as type-level arguments::

    >>> U8.conv(128, U16)
    32896
    >>> U16.conv(32896, U8)
    128
    >>> U8.conv(255, F32)
    1.0

Integer kinds span ``[0, 2**bits - 1]``, float kinds span ``[0.0, 1.0]``.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import ClassVar, Type

import numpy as np
from boundednumbers import clamp
from numpy import ndarray

from ..types.color_types import Scalar
from ..utils.num_utils import np_round_half_up, round_half_up


class Channel(ABC):
    """Range and conversion law shared by every channel kind.

    Subclasses set ``dtype``, ``integral`` and ``_max``. All operations are
    classmethods; channel kinds are never instantiated.
    """

    dtype: ClassVar[type] = np.float64
    integral: ClassVar[bool] = False
    _zero: ClassVar[Scalar] = 0
    _max: ClassVar[Scalar] = 1

    @classmethod
    def ch_max(cls) -> Scalar:
        return cls._max

    @classmethod
    def ch_zero(cls) -> Scalar:
        return cls._zero

    @classmethod
    def ch_mid(cls) -> Scalar:
        return cls._max / 2

    @classmethod
    @abstractmethod
    def to_range(cls, value):
        """Return ``value`` clamped into ``[ch_zero, ch_max]``."""

    @classmethod
    def in_range(cls, value) -> bool:
        try:
            return cls.ch_zero() <= value <= cls.ch_max()
        except TypeError:
            return False

    @classmethod
    def fraction(cls, value) -> float:
        """Position of the clamped ``value`` inside this kind's range, in ``[0, 1]``."""
        zero = cls.ch_zero()
        return float(cls.to_range(value) - zero) / float(cls.ch_max() - zero)

    @classmethod
    def from_fraction(cls, fraction: float):
        zero = cls.ch_zero()
        return cls.to_range(zero + fraction * (cls.ch_max() - zero))

    @classmethod
    def conv(cls, value, target: Type[Channel]):
        """
        Convert ``value`` from this kind's range into ``target``'s range.

        The value is clamped first, then linearly rescaled. Integer targets are
        rounded (ties away from zero) so that widening and narrowing again gives
        back the original value.

        Args:
            value: A value of this channel kind.
            target: The channel kind to convert into.

        Returns:
            The rescaled value as a plain ``int`` or ``float``.
        """
        if target is cls:
            return cls.to_range(value)
        if issubclass(cls, IntChannel) and issubclass(target, IntChannel):
            # exact integer rescale, no float error and no overflow
            source_max = cls.ch_max()
            scaled = cls.to_range(value) * target.ch_max()
            return (2 * scaled + source_max) // (2 * source_max)
        return target.from_fraction(cls.fraction(value))

    # ------------------ ARRAYS ------------------
    @classmethod
    def np_fraction(cls, values: ndarray) -> ndarray:
        arr = np.asarray(values, dtype=np.float64)
        zero, top = float(cls.ch_zero()), float(cls.ch_max())
        arr = np.clip(np.nan_to_num(arr, nan=zero, posinf=top, neginf=zero), zero, top)
        return (arr - zero) / (top - zero)

    @classmethod
    def np_from_fraction(cls, fractions: ndarray) -> ndarray:
        zero, top = float(cls.ch_zero()), float(cls.ch_max())
        scaled = zero + np.asarray(fractions, dtype=np.float64) * (top - zero)
        if not cls.integral:
            return np.clip(scaled, zero, top).astype(cls.dtype)
        scaled = np_round_half_up(scaled)
        # float(ch_max) of a 64-bit kind is 2**64, one past what the dtype holds
        full = scaled >= top
        inside = np.where(full, zero, np.maximum(scaled, zero)).astype(cls.dtype)
        return np.where(full, np.array(cls.ch_max(), dtype=cls.dtype), inside)

    @classmethod
    def np_conv(cls, values: ndarray, target: Type[Channel]) -> ndarray:
        """Vectorized ``conv``: rescale a whole array into ``target``'s dtype."""
        if issubclass(cls, IntChannel) and issubclass(target, IntChannel):
            return cls._np_int_conv(values, target)
        return target.np_from_fraction(cls.np_fraction(values))


class IntChannel(Channel):
    integral: ClassVar[bool] = True
    bits: ClassVar[int]

    @classmethod
    def ch_mid(cls) -> int:
        return cls._max // 2

    @classmethod
    def to_range(cls, value) -> int:
        if isinstance(value, (int, np.integer)):
            value = int(value)
        else:
            value = float(value)
            if math.isnan(value):
                return cls.ch_zero()
            if math.isinf(value):
                return cls.ch_max() if value > 0 else cls.ch_zero()
            value = round_half_up(value)
        return int(clamp(value, cls.ch_zero(), cls.ch_max()))

    @classmethod
    def _np_int_conv(cls, values: ndarray, target: Type[IntChannel]) -> ndarray:
        # object arrays hold Python ints, so the products below never overflow
        arr = np.asarray(values)
        shape = arr.shape
        if not np.issubdtype(arr.dtype, np.integer):
            arr = cls.np_from_fraction(cls.np_fraction(arr))
        ints = np.maximum(np.minimum(arr.reshape(-1).astype(object), cls.ch_max()), cls.ch_zero())
        source_max = cls.ch_max()
        scaled = (2 * ints * target.ch_max() + source_max) // (2 * source_max)
        return scaled.astype(target.dtype).reshape(shape)


class FloatChannel(Channel):
    _zero: ClassVar[float] = 0.0
    _max: ClassVar[float] = 1.0

    @classmethod
    def ch_mid(cls) -> float:
        return 0.5

    @classmethod
    def to_range(cls, value) -> float:
        value = float(value)
        if math.isnan(value):
            return cls.ch_zero()
        if math.isinf(value):
            return cls.ch_max() if value > 0 else cls.ch_zero()
        return float(clamp(value, cls.ch_zero(), cls.ch_max()))


class U8(IntChannel):
    bits = 8
    dtype = np.uint8
    _max = 0xFF


class U16(IntChannel):
    bits = 16
    dtype = np.uint16
    _max = 0xFFFF


class U32(IntChannel):
    bits = 32
    dtype = np.uint32
    _max = 0xFFFF_FFFF


class U64(IntChannel):
    bits = 64
    dtype = np.uint64
    _max = 0xFFFF_FFFF_FFFF_FFFF


class F32(FloatChannel):
    dtype = np.float32


class F64(FloatChannel):
    dtype = np.float64


CHANNEL_KINDS: tuple[Type[Channel], ...] = (U8, U16, U32, U64, F32, F64)
