import operator
import string

import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import RGBTuple
from ..types.limits import HEX_MASK, HEX_DIGITS

_HEX_PREFIXES = ("#", "0x", "0X")


def hex_to_rgb(value: int) -> RGBTuple:
    """
    Split a 24-bit integer into its (r, g, b) bytes.

    Bits above the low 24 are discarded, negative values included.
    """
    value = operator.index(value) & HEX_MASK
    return (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF


def rgb_to_hex(r: int, g: int, b: int) -> int:
    """Pack 8-bit channels into ``R<<16 | G<<8 | B``."""
    return (r << 16) | (g << 8) | b


def parse_hex_string(text: str) -> int:
    """
    Parse ``"#RRGGBB"``, ``"RRGGBB"``, ``"0xRRGGBB"`` or the short ``"#RGB"`` form.

    Raises:
        ValueError: if the text is not a 3 or 6 digit hexadecimal color
    """
    if not isinstance(text, str):
        raise TypeError(f"Expected a hex string, got {type(text).__name__}")
    digits = text.strip()
    for prefix in _HEX_PREFIXES:
        if digits.startswith(prefix):
            digits = digits[len(prefix):]
            break
    if not digits or any(c not in string.hexdigits for c in digits):
        raise ValueError(f"Invalid hex color: {text!r}")
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    if len(digits) != HEX_DIGITS:
        raise ValueError(f"Hex color must have 3 or 6 digits, got {text!r}")
    return int(digits, 16)


def format_hex_string(value: int) -> str:
    return f"#{value & HEX_MASK:06x}"


def np_rgb_to_hex(rgb: NDArray) -> NDArray:
    """
    Vectorized: Pack an array of shape (..., 3) of 8-bit channels into integers.

    Returns:
        int64 array of shape (...)
    """
    rgb = np.asarray(rgb).astype(np.int64)
    if rgb.shape[-1] != 3:
        raise ValueError(f"Expected last dimension to be 3, got shape {rgb.shape}")
    return (rgb[..., 0] << 16) | (rgb[..., 1] << 8) | rgb[..., 2]


def np_hex_to_rgb(values: NDArray) -> NDArray:
    """
    Vectorized: Split 24-bit integers into channels.

    Returns:
        uint8 array of shape (..., 3)
    """
    values = np.asarray(values, dtype=np.int64) & HEX_MASK
    return np.stack(
        [(values >> 16) & 0xFF, (values >> 8) & 0xFF, values & 0xFF], axis=-1
    ).astype(np.uint8)
