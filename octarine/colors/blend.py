"""
Blend modes.

Every mode is a pure function of two colors and is also attached to
:class:`Color` as a method, so ``screen(a, b) == a.screen(b)``.
"""
import numpy as np
from boundednumbers import clamp

from ..types.limits import CHANNEL_MAX
from .arithmetic import _channels, _to_color, add, subtract, multiply
from .color import Color

WHITE_RGB = (CHANNEL_MAX, CHANNEL_MAX, CHANNEL_MAX)


def screen(a: Color, b: Color) -> Color:
    """``255 - (255 - a) * (255 - b) // 255`` per channel."""
    inv_a = CHANNEL_MAX - _channels(a)
    inv_b = CHANNEL_MAX - _channels(b)
    return _to_color(CHANNEL_MAX - (inv_a * inv_b) // CHANNEL_MAX)


def overlay(a: Color, b: Color) -> Color:
    return screen(a, multiply(a, b))


def difference(a: Color, b: Color) -> Color:
    return _to_color(np.abs(_channels(a) - _channels(b)))


def lighten(a: Color, b: Color) -> Color:
    return _to_color(np.maximum(_channels(a), _channels(b)))


def darken(a: Color, b: Color) -> Color:
    return _to_color(np.minimum(_channels(a), _channels(b)))


def invert(a: Color) -> Color:
    return difference(a, Color(*WHITE_RGB))


def mix(a: Color, b: Color, t: float = 0.5) -> Color:
    """
    Linear interpolation in RGB: ``t = 0`` gives ``a``, ``t = 1`` gives ``b``.

    ``t`` is clamped to [0, 1].
    """
    t = float(clamp(float(t), 0.0, 1.0))
    ca = _channels(a)
    cb = _channels(b)
    return _to_color(np.floor(ca + (cb - ca) * t + 0.5))


BLEND_MODES = {
    "add": add,
    "subtract": subtract,
    "multiply": multiply,
    "screen": screen,
    "overlay": overlay,
    "difference": difference,
    "lighten": lighten,
    "darken": darken,
}


def blend(a: Color, b: Color, mode: str) -> Color:
    """Apply a blend mode by name, e.g. ``blend(a, b, "screen")``."""
    try:
        fn = BLEND_MODES[mode.lower()]
    except KeyError:
        raise ValueError(f"Unknown blend mode: {mode!r}. Expected one of {sorted(BLEND_MODES)}") from None
    return fn(a, b)


Color.add = add
Color.subtract = subtract
Color.multiply = multiply
Color.screen = screen
Color.overlay = overlay
Color.difference = difference
Color.lighten = lighten
Color.darken = darken
Color.invert = invert
Color.mix = mix
Color.blend = blend
