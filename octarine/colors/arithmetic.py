import numbers
import warnings
from typing import Callable

import numpy as np

from ..conversions import np_clamp
from ..types.limits import CHANNEL_MAX
from .color import Color


def _channels(color: Color) -> np.ndarray:
    return np.array(color.to_rgb(), dtype=np.int64)


def _to_color(result: np.ndarray, overflow_function: Callable = np_clamp) -> Color:
    """Apply overflow handling to raw channel results and build a new Color."""
    result = overflow_function(result, 0, CHANNEL_MAX)
    return Color(*(int(v) for v in result))


def add(a: Color, b: Color) -> Color:
    """Per-channel sum, saturating at 255."""
    return _to_color(_channels(a) + _channels(b))


def subtract(a: Color, b: Color) -> Color:
    """Per-channel difference, saturating at 0."""
    return _to_color(_channels(a) - _channels(b))


def multiply(a: Color, b: Color) -> Color:
    """Multiply blend: ``a * b // 255`` per channel."""
    return _to_color((_channels(a) * _channels(b)) // CHANNEL_MAX)


def scale(a: Color, factor: float) -> Color:
    """Multiply every channel by a scalar, rounding half up and clamping."""
    result = np.floor(_channels(a) * float(factor) + 0.5)
    return _to_color(result)


def divide(a: Color, b: Color) -> Color:
    """
    Per-channel integer division.

    A zero channel in ``b`` saturates the result channel to 255 (or 0 when the
    dividend channel is also 0) and emits a RuntimeWarning.
    """
    num = _channels(a)
    den = _channels(b)
    zero = den == 0
    if zero.any():
        warnings.warn(
            f"Division by a zero channel in {b!r}; saturating those channels",
            RuntimeWarning,
            stacklevel=3,
        )
    safe_den = np.where(zero, 1, den)
    result = np.where(zero, np.where(num > 0, CHANNEL_MAX, 0), num // safe_den)
    return _to_color(result)


def _is_scalar(value) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


# -----------------------
# Operator overloads
# -----------------------
def _add(self, other):
    if isinstance(other, Color):
        return add(self, other)
    return NotImplemented


def _sub(self, other):
    if isinstance(other, Color):
        return subtract(self, other)
    return NotImplemented


def _mul(self, other):
    if isinstance(other, Color):
        return multiply(self, other)
    if _is_scalar(other):
        return scale(self, other)
    return NotImplemented


def _truediv(self, other):
    if isinstance(other, Color):
        return divide(self, other)
    if _is_scalar(other):
        if other == 0:
            raise ZeroDivisionError("Cannot divide a color by zero")
        return scale(self, 1.0 / float(other))
    return NotImplemented


# Inject arithmetic operators into Color
Color.__add__ = _add
Color.__sub__ = _sub
Color.__mul__ = _mul
Color.__rmul__ = _mul
Color.__truediv__ = _truediv
