import math
import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import UnitRGBTuple
from ..types.limits import HUE_SECTOR
from .numbers import normalize_hue, np_normalize_hue, clamp_unit, np_clamp

## HSL to RGB conversions

def hsl_to_unit_rgb(h: float, s: float, l: float) -> UnitRGBTuple:
    """
    Convert HSL to RGB.
    Based on: https://en.wikipedia.org/wiki/HSL_and_HSV#Converting_to_RGB

    Hue wraps around the circle; saturation and luminance are clamped to [0, 1].

    Args:
        h: Hue in degrees
        s: Saturation in [0, 1]
        l: Luminance in [0, 1]

    Returns:
        (r, g, b) in [0, 1]
    """
    h = normalize_hue(h)
    s = clamp_unit(s)
    l = clamp_unit(l)

    m1 = l + s * (l if l < 0.5 else 1 - l)
    m2 = m1 - (m1 - l) * 2 * abs(((h / HUE_SECTOR) % 2) - 1)
    m0 = 2 * l - m1

    hue_section = int(math.floor(h / HUE_SECTOR))

    if hue_section == 0:
        return m1, m2, m0
    if hue_section == 1:
        return m2, m1, m0
    if hue_section == 2:
        return m0, m1, m2
    if hue_section == 3:
        return m0, m2, m1
    if hue_section == 4:
        return m2, m0, m1
    return m1, m0, m2


def np_hsl_to_unit_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL to RGB.

    Args:
        h: array-like or scalar, hue in degrees
        s: array-like or scalar, saturation in [0, 1]
        l: array-like or scalar, luminance in [0, 1]

    Returns:
        rgb: array of shape (..., 3): (r, g, b) in [0, 1]
    """
    h = np_normalize_hue(h)
    s = np_clamp(np.asarray(s, dtype=float), 0.0, 1.0)
    l = np_clamp(np.asarray(l, dtype=float), 0.0, 1.0)

    out_shape = np.broadcast(h, s, l).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    l = np.broadcast_to(l, out_shape)

    m1 = l + s * np.where(l < 0.5, l, 1 - l)
    m2 = m1 - (m1 - l) * 2 * np.abs(((h / HUE_SECTOR) % 2) - 1)
    m0 = 2 * l - m1

    hue_section = np.floor(h / HUE_SECTOR).astype(int)
    sections = [hue_section == i for i in range(5)]

    r = np.select(sections, [m1, m2, m0, m0, m2], default=m1)
    g = np.select(sections, [m2, m1, m1, m2, m0], default=m0)
    b = np.select(sections, [m0, m0, m2, m1, m1], default=m2)

    return np.stack([r, g, b], axis=-1)

## HSV to RGB conversions

def hsv_to_unit_rgb(h: float, s: float, v: float) -> UnitRGBTuple:
    """
    Convert HSV to RGB.

    Hue wraps around the circle; saturation and value are clamped to [0, 1].

    Returns:
        (r, g, b) in [0, 1]
    """
    h = normalize_hue(h)
    s = clamp_unit(s)
    v = clamp_unit(v)

    if s == 0:
        return v, v, v

    h_sector = h / HUE_SECTOR
    i = int(math.floor(h_sector))
    f = h_sector - i
    p = v * (1 - s)
    q = v * (1 - s * f)
    t = v * (1 - s * (1 - f))

    if i == 0:
        return v, t, p
    if i == 1:
        return q, v, p
    if i == 2:
        return p, v, t
    if i == 3:
        return p, q, v
    if i == 4:
        return t, p, v
    return v, p, q


def np_hsv_to_unit_rgb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """
    Vectorized: Convert HSV to RGB.

    Returns:
        rgb: array of shape (..., 3): (r, g, b) in [0, 1]
    """
    h = np_normalize_hue(h)
    s = np_clamp(np.asarray(s, dtype=float), 0.0, 1.0)
    v = np_clamp(np.asarray(v, dtype=float), 0.0, 1.0)

    out_shape = np.broadcast(h, s, v).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    v = np.broadcast_to(v, out_shape)

    h_sector = h / HUE_SECTOR
    i = np.floor(h_sector).astype(int)
    f = h_sector - i
    p = v * (1 - s)
    q = v * (1 - s * f)
    t = v * (1 - s * (1 - f))

    sections = [i == k for k in range(5)]
    r = np.select(sections, [v, q, p, p, t], default=v)
    g = np.select(sections, [t, v, v, q, p], default=p)
    b = np.select(sections, [p, p, t, v, v], default=q)

    return np.stack([r, g, b], axis=-1)
