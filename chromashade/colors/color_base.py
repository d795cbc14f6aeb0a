from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict, Hashable, Iterator, Tuple, Type

import numpy as np

from ..spaces import ColorSpaceTag

logger = logging.getLogger(__name__)


class ColorBase(ABC):
    __slots__ = ('_value', '_is_frozen')  # prevents adding new attributes → immutability

    num_channels: ClassVar[int] = 1
    channel_names: ClassVar[Tuple[str, ...]] = ()
    space: ClassVar[Type[ColorSpaceTag]]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def _set_value(self, value: Tuple[Any, ...]) -> None:
        # safe assignment; __setattr__ still allows it until the freeze below
        self._value = value

        # freeze instance, no more writes allowed
        super().__setattr__('_is_frozen', True)

    @classmethod
    def _from_value(cls, value: Tuple[Any, ...]):
        """Build an instance around ``value`` without validating or clamping it."""
        instance = cls.__new__(cls)
        instance._set_value(tuple(value))
        return instance

    @classmethod
    def _check_arity(cls, values: Tuple[Any, ...]) -> None:
        if len(values) != cls.num_channels:
            raise TypeError(
                f"{cls.__name__} expects {cls.num_channels} channels, got {len(values)}"
            )

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> Tuple[Any, ...]:
        return self._value

    def tuple(self) -> Tuple[Any, ...]:
        """Deconstruct this color into a tuple of its channels."""
        return self._value

    def array(self, dtype=None) -> np.ndarray:
        """Channels as a numpy array (``float64`` unless a dtype is given)."""
        return np.array([float(c) for c in self.tuple()], dtype=dtype or np.float64)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.tuple())

    def __len__(self) -> int:
        return len(self.tuple())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        return type(self) is type(other) and self._value == other._value

    def __hash__(self) -> int:
        return hash((type(self), self._value))

    def __repr__(self) -> str:
        fields = ", ".join(f"{n}={v!r}" for n, v in zip(self.channel_names, self._value))
        return f"{self.__class__.__name__}({fields})"

    # ------------------ NORMALIZATION ------------------
    @abstractmethod
    def normalize(self):
        """Return this color with every channel in range and special cases unified."""

    @abstractmethod
    def is_normal(self) -> bool:
        """True if ``normalize`` would return an equal color."""


def build_class(
    registry: Dict[Hashable, type],
    key: Hashable,
    name: str,
    bases: Tuple[type, ...],
    namespace: Dict[str, Any],
) -> type:
    """Return the class registered under ``key``, creating it on first use.

    One class per key is what makes two colors of different spaces or channel
    kinds different types.
    """
    cls = registry.get(key)
    if cls is None:
        cls = type(name, bases, {"__slots__": (), **namespace})
        registry[key] = cls
        logger.debug("created color class %s for %r", name, key)
    return cls
