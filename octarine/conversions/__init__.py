"""
Octarine Color Space Conversions
================================

Pure conversion functions between 8-bit RGB, unit RGB, HSL, HSV and 24-bit
hexadecimal, with scalar and vectorized (numpy) implementations.

Conventions
-----------
- Hue is in degrees and always returned in [0, 360). Input hue wraps.
- Saturation, luminance and value are unit floats. Input values outside
  [0, 1] are clamped, not rejected.
- Achromatic input (r == g == b) has hue 0 and saturation 0.

Conversion Functions
-------------------

RGB → HSL / HSV:
    unit_rgb_to_hsl(r, g, b), np_unit_rgb_to_hsl(r, g, b)
    unit_rgb_to_hsv(r, g, b), np_unit_rgb_to_hsv(r, g, b)

HSL / HSV → RGB:
    hsl_to_unit_rgb(h, s, l), np_hsl_to_unit_rgb(h, s, l)
    hsv_to_unit_rgb(h, s, v), np_hsv_to_unit_rgb(h, s, v)

Hexadecimal:
    rgb_to_hex(r, g, b), hex_to_rgb(value)
    np_rgb_to_hex(rgb), np_hex_to_rgb(values)
    parse_hex_string(text), format_hex_string(value)

Examples
--------
>>> from octarine.conversions import unit_rgb_to_hsl, hsl_to_unit_rgb
>>> unit_rgb_to_hsl(1.0, 0.0, 0.0)
(0.0, 1.0, 0.5)
>>> hsl_to_unit_rgb(120.0, 1.0, 0.5)
(0.0, 1.0, 0.0)
"""

from .to_hsl import unit_rgb_to_hsl, np_unit_rgb_to_hsl
from .to_hsv import unit_rgb_to_hsv, np_unit_rgb_to_hsv
from .to_rgb import (
    hsl_to_unit_rgb,
    hsv_to_unit_rgb,
    np_hsl_to_unit_rgb,
    np_hsv_to_unit_rgb,
)
from .hex import (
    rgb_to_hex,
    hex_to_rgb,
    np_rgb_to_hex,
    np_hex_to_rgb,
    parse_hex_string,
    format_hex_string,
)
from .numbers import (
    normalize_hue,
    np_normalize_hue,
    clamp_unit,
    clamp_channel,
    unit_to_byte,
    byte_to_unit,
    np_unit_to_byte,
    np_clamp,
)

__all__ = [
    # RGB → HSL / HSV
    'unit_rgb_to_hsl',
    'np_unit_rgb_to_hsl',
    'unit_rgb_to_hsv',
    'np_unit_rgb_to_hsv',

    # HSL / HSV → RGB
    'hsl_to_unit_rgb',
    'hsv_to_unit_rgb',
    'np_hsl_to_unit_rgb',
    'np_hsv_to_unit_rgb',

    # Hexadecimal
    'rgb_to_hex',
    'hex_to_rgb',
    'np_rgb_to_hex',
    'np_hex_to_rgb',
    'parse_hex_string',
    'format_hex_string',

    # Numbers
    'normalize_hue',
    'np_normalize_hue',
    'clamp_unit',
    'clamp_channel',
    'unit_to_byte',
    'byte_to_unit',
    'np_unit_to_byte',
    'np_clamp',
]
