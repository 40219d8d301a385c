import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import HSLTuple
from ..types.limits import HUE_360, HUE_SECTOR


def rgb_hue(r: float, g: float, b: float, max_c: float, delta: float) -> float:
    """
    Hue in degrees [0, 360) of a unit RGB triple.

    Shared by the HSL and HSV conversions; achromatic input (delta == 0) has hue 0.
    """
    if delta == 0:
        return 0.0
    if max_c == r:
        return (HUE_SECTOR * ((g - b) / delta) + HUE_360) % HUE_360
    if max_c == g:
        return (HUE_SECTOR * ((b - r) / delta) + 120.0) % HUE_360
    return (HUE_SECTOR * ((r - g) / delta) + 240.0) % HUE_360


def np_rgb_hue(r: NDArray, g: NDArray, b: NDArray, max_c: NDArray, delta: NDArray) -> NDArray:
    """Vectorized counterpart of :func:`rgb_hue`."""
    hue = np.zeros_like(max_c)
    mask = delta > 0
    # red wins ties, then green, matching the scalar branch order
    mask_r = mask & (max_c == r)
    mask_g = mask & ~mask_r & (max_c == g)
    mask_b = mask & ~mask_r & ~mask_g

    hue[mask_r] = (HUE_SECTOR * ((g[mask_r] - b[mask_r]) / delta[mask_r]) + HUE_360) % HUE_360
    hue[mask_g] = (HUE_SECTOR * ((b[mask_g] - r[mask_g]) / delta[mask_g]) + 120.0) % HUE_360
    hue[mask_b] = (HUE_SECTOR * ((r[mask_b] - g[mask_b]) / delta[mask_b]) + 240.0) % HUE_360
    return hue


def unit_rgb_to_hsl(r: float, g: float, b: float) -> HSLTuple:
    """
    Convert RGB to HSL.

    Args:
        r: Red component in [0, 1]
        g: Green component in [0, 1]
        b: Blue component in [0, 1]

    Returns:
        (hue [0,360), saturation [0,1], luminance [0,1])
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    luminance = (max_c + min_c) / 2.0

    if delta == 0:
        return 0.0, 0.0, luminance

    total = max_c + min_c
    if luminance < 0.5:
        saturation = delta / total
    else:
        saturation = delta / (2.0 - total)

    return rgb_hue(r, g, b, max_c, delta), saturation, luminance


def np_unit_rgb_to_hsl(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert RGB to HSL.

    Args:
        r, g, b: array-like or scalar, [0,1]

    Returns:
        hsl: array of shape (..., 3): (hue [0,360), saturation [0,1], luminance [0,1])
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    max_c = np.maximum(np.maximum(r, g), b)
    min_c = np.minimum(np.minimum(r, g), b)
    delta = max_c - min_c
    total = max_c + min_c

    luminance = total / 2.0

    saturation = np.zeros(out_shape)
    low = (delta > 0) & (luminance < 0.5)
    high = (delta > 0) & (luminance >= 0.5)
    saturation[low] = delta[low] / total[low]
    saturation[high] = delta[high] / (2.0 - total[high])

    hue = np_rgb_hue(r, g, b, max_c, delta)

    return np.stack([hue, saturation, luminance], axis=-1)
