import math

import numpy as np
from numpy import ndarray as NDArray
from boundednumbers import clamp, BoundType, bound_type_to_np_function

from ..types.limits import CHANNEL_MAX, HUE_360

# array-aware clamp; the plain ``clamp`` above only takes scalars
np_clamp = bound_type_to_np_function[BoundType.CLAMP]


def normalize_hue(h: float) -> float:
    """Normalize hue to [0, 360) range. Non-finite hues map to 0."""
    h = float(h)
    if not math.isfinite(h):
        return 0.0
    h %= HUE_360
    # a tiny negative input rounds up to exactly 360.0
    return 0.0 if h >= HUE_360 else h


def np_normalize_hue(h: NDArray) -> NDArray:
    """Vectorized: Normalize hue to [0, 360) range. Non-finite hues map to 0."""
    h = np.asarray(h, dtype=float)
    finite = np.isfinite(h)
    h = np.where(finite, h, 0.0) % HUE_360
    return np.where(h >= HUE_360, 0.0, h)


def clamp_unit(x: float) -> float:
    """Clamp a value into the inclusive range ``[0, 1]``."""
    return float(clamp(float(x), 0.0, 1.0))


def clamp_channel(x: int) -> int:
    """Clamp an integer channel into ``[0, 255]``."""
    return int(clamp(int(x), 0, CHANNEL_MAX))


def unit_to_byte(x: float) -> int:
    """Quantize a unit float to an 8-bit channel, rounding half up."""
    return int(clamp_unit(x) * CHANNEL_MAX + 0.5)


def byte_to_unit(x: int) -> float:
    return x / CHANNEL_MAX


def np_unit_to_byte(x: NDArray) -> NDArray:
    """Vectorized: Quantize unit floats to uint8 channels, rounding half up."""
    x = np_clamp(np.asarray(x, dtype=float), 0.0, 1.0)
    return np.floor(x * CHANNEL_MAX + 0.5).astype(np.uint8)
