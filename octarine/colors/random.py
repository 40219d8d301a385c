"""
Random color generation.

Draws come from a :class:`numpy.random.Generator`. Pass your own (seeded)
generator for reproducible output; otherwise a process-wide default is used.
Calling :func:`seed` replaces the default, including for wheels built earlier
without their own generator.
"""
from __future__ import annotations
from typing import Optional

import numpy as np
from numpy.random import Generator

from ..conversions import normalize_hue
from ..types.color_types import ChannelBounds
from ..types.limits import (
    CHANNEL_MAX,
    WHEEL_STEP_MIN,
    WHEEL_STEP_MAX,
    WHEEL_SATURATION,
    WHEEL_VALUE,
)
from .color import Color

_default_rng: Generator = np.random.default_rng()


def seed(value: Optional[int] = None) -> None:
    """Replace the default generator with a freshly seeded one."""
    global _default_rng
    _default_rng = np.random.default_rng(value)


def get_rng(rng: Optional[Generator] = None) -> Generator:
    return rng if rng is not None else _default_rng


def validate_bounds(bounds: ChannelBounds) -> tuple[np.ndarray, np.ndarray]:
    """
    Check per-channel ``(min, max)`` bounds and split them into low/high arrays.

    Raises:
        ValueError: if there are not three pairs, a pair is inverted, or a
            bound lies outside [0, 255]
    """
    pairs = [tuple(pair) for pair in bounds]
    if len(pairs) != 3 or any(len(pair) != 2 for pair in pairs):
        raise ValueError(f"Expected three (min, max) pairs, got {bounds!r}")

    low = np.array([int(lo) for lo, _ in pairs], dtype=np.int64)
    high = np.array([int(hi) for _, hi in pairs], dtype=np.int64)

    if np.any(low > high):
        raise ValueError(f"Channel bounds must satisfy min <= max, got {bounds!r}")
    if np.any(low < 0) or np.any(high > CHANNEL_MAX):
        raise ValueError(f"Channel bounds must lie within [0, {CHANNEL_MAX}], got {bounds!r}")
    return low, high


def random_color(rng: Optional[Generator] = None) -> Color:
    values = get_rng(rng).integers(0, CHANNEL_MAX, size=3, endpoint=True)
    return Color(*(int(v) for v in values))


def random_within(bounds: ChannelBounds, rng: Optional[Generator] = None) -> Color:
    """
    Draw each channel uniformly from its closed bound.

    >>> c = random_within(((0, 0), (100, 200), (255, 255)))
    >>> c.red, c.blue
    (0, 255)
    """
    low, high = validate_bounds(bounds)
    values = get_rng(rng).integers(low, high, endpoint=True)
    return Color(*(int(v) for v in values))


def random_colors(count: int, bounds: Optional[ChannelBounds] = None,
                  rng: Optional[Generator] = None) -> list[Color]:
    """Draw ``count`` colors in one batch, optionally within per-channel bounds."""
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    if bounds is None:
        low = np.zeros(3, dtype=np.int64)
        high = np.full(3, CHANNEL_MAX, dtype=np.int64)
    else:
        low, high = validate_bounds(bounds)
    values = get_rng(rng).integers(low, high, size=(count, 3), endpoint=True)
    return [Color(*(int(v) for v in row)) for row in values]


class ColorWheel:
    """
    Endless iterator of saturated colors spread around the hue circle.

    Each step advances the hue by a random 36-72 degrees, so consecutive
    colors never pool in one hue family. Do not exhaust it with ``list()``.
    """

    def __init__(self, start: float = 0.0, rng: Optional[Generator] = None) -> None:
        self.phase = normalize_hue(start)
        self._rng = rng

    def __iter__(self) -> ColorWheel:
        return self

    def __next__(self) -> Color:
        shift = get_rng(self._rng).uniform(WHEEL_STEP_MIN, WHEEL_STEP_MAX)
        self.phase = normalize_hue(self.phase + shift)
        return Color.from_hsv(self.phase, WHEEL_SATURATION, WHEEL_VALUE)

    def take(self, n: int) -> list[Color]:
        return [next(self) for _ in range(n)]
