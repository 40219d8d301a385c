import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import HSVTuple
from .to_hsl import rgb_hue, np_rgb_hue


def unit_rgb_to_hsv(r: float, g: float, b: float) -> HSVTuple:
    """
    Convert RGB to HSV.

    Args:
        r, g, b: components in [0, 1]

    Returns:
        (hue [0,360), saturation [0,1], value [0,1])
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    if delta == 0:
        return 0.0, 0.0, max_c

    saturation = delta / max_c
    return rgb_hue(r, g, b, max_c, delta), saturation, max_c


def np_unit_rgb_to_hsv(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert RGB to HSV.

    Returns:
        hsv: array of shape (..., 3)
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

    saturation = np.zeros(out_shape)
    mask = delta > 0
    saturation[mask] = delta[mask] / max_c[mask]

    hue = np_rgb_hue(r, g, b, max_c, delta)

    return np.stack([hue, saturation, max_c], axis=-1)
