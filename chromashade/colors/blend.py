"""
Blending and straight-alpha compositing of linear colors.

All mixing is done on channel fractions in float, then quantized back into the
color's own channel kind, so integer linear colors blend the same way float
ones do.
"""

from __future__ import annotations

from typing import Tuple

from ..channels import F64
from .alpha import Alpha
from .rgb import LinearRGB


def _require_linear(color, operation: str) -> None:
    if not isinstance(color, LinearRGB):
        raise TypeError(f"{operation} needs a linear color, got {type(color).__name__}")


def _mix(fg, bg, t: float) -> Tuple[float, float, float]:
    return tuple(f * t + b * (1.0 - t) for f, b in zip(fg.fractions(), bg.fractions()))


def _from_fractions(color_type, fractions):
    ch = color_type.channel
    return color_type(*(F64.conv(f, ch) for f in fractions))


def blend(self, other, ratio):
    """
    ``self * ratio + other * (1 - ratio)``.

    ``ratio`` is a value of this color's channel kind, so ``0.25`` for float
    colors and ``16384`` for 16-bit ones mean the same thing.

    Raises:
        TypeError: If ``other`` is not of the same class.
    """
    _require_linear(self, "blend")
    if type(other) is not type(self):
        raise TypeError(f"cannot blend {type(self).__name__} with {type(other).__name__}")
    return _from_fractions(type(self), _mix(self, other, self.channel.fraction(ratio)))


def alpha_blend_opaque(self: Alpha, background):
    """Composite over an opaque background; the result is a plain color."""
    _require_linear(self.color, "blend")
    if isinstance(background, Alpha):
        background = background.color
    if type(background) is not self.color_type:
        raise TypeError(f"cannot blend {type(self).__name__} over {type(background).__name__}")
    t = self.alpha_channel.fraction(self.alpha)
    return _from_fractions(self.color_type, _mix(self.color, background, t))


def alpha_blend(self: Alpha, background):
    """
    Porter-Duff "over": composite this color over ``background``.

    A background without alpha is taken as opaque. When both alphas are zero
    the result is transparent black.
    """
    _require_linear(self.color, "alpha_blend")
    if not isinstance(background, Alpha):
        background = type(self)(background)
    if type(background) is not type(self):
        raise TypeError(f"cannot blend {type(self).__name__} over {type(background).__name__}")

    alpha_ch = self.alpha_channel
    fa = alpha_ch.fraction(self.alpha)
    ba = alpha_ch.fraction(background.alpha) * (1.0 - fa)
    out_alpha = fa + ba
    if out_alpha == 0.0:
        ch = self.color_type.channel
        zero = ch.ch_zero()
        return type(self)(self.color_type(zero, zero, zero), alpha_ch.ch_zero())

    mixed = (
        (f * fa + b * ba) / out_alpha
        for f, b in zip(self.color.fractions(), background.color.fractions())
    )
    return type(self)(_from_fractions(self.color_type, mixed), F64.conv(out_alpha, alpha_ch))


LinearRGB.blend = blend
Alpha.blend = alpha_blend_opaque
Alpha.alpha_blend = alpha_blend
