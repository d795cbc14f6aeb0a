"""
Channel kinds and angle kinds.

Channel kinds (``U8``, ``U16``, ``U32``, ``U64``, ``F32``, ``F64``) describe the
range of one color component. Angle kinds (``Deg``, ``Rad``, ``Rev``, ``Rev8``,
``Rev16``) are value types for hue that wrap instead of clamping, and also
implement the channel interface so they can be converted with ``conv``.
"""

from .channel import Channel, IntChannel, FloatChannel, U8, U16, U32, U64, F32, F64, CHANNEL_KINDS
from .angle import Angle, FloatAngle, IntAngle, Deg, Rad, Rev, Rev8, Rev16, ANGLE_KINDS

__all__ = [
    "Channel", "IntChannel", "FloatChannel",
    "U8", "U16", "U32", "U64", "F32", "F64",
    "CHANNEL_KINDS",
    "Angle", "FloatAngle", "IntAngle",
    "Deg", "Rad", "Rev", "Rev8", "Rev16",
    "ANGLE_KINDS",
]
