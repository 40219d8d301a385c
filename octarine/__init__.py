"""
Octarine - Simple Color Conversion Library
==========================================

Converts colors between RGB, HSL, HSV, W3C web colors and hexadecimal, and
does simple color manipulation.

Key Features
------------
- One immutable type, :class:`Color`, storing 8-bit RGB
- Conversions to and from HSL, HSV, hex and the 148 CSS color keywords
- Saturating arithmetic (``+``, ``-``, ``*``, ``/``) and blend modes
- Random colors, optionally bounded per channel
- Vectorized numpy conversions for batches of colors

Note
----
Colors are stored as 8-bit channels, so converting from HSL/HSV to a
:class:`Color` and back will not always give the same numbers:

>>> from octarine import Color
>>> Color.from_hsl(0.0, 0.0, 0.5).to_hsl() == (0.0, 0.0, 0.5)
False

Quick Start
-----------
>>> red = Color.from_web_color("red")
>>> red == Color(255, 0, 0)
True
>>> Color(100, 100, 100).to_hex() == 0x646464
True
>>> red.to_hsl()
(0.0, 1.0, 0.5)
>>> Color.from_web_color("not-a-color") is None
True
"""

from .colors import (
    Color,
    ColorRange,
    ColorWheel,
    screen,
    overlay,
    difference,
    lighten,
    darken,
    invert,
    mix,
    blend,
    random_color,
    random_within,
    random_colors,
)
from .constants import WEB_COLORS, lookup_web_color
from .constants import primary
from .types.color_types import Equivalence
from .conversions import (
    unit_rgb_to_hsl,
    unit_rgb_to_hsv,
    hsl_to_unit_rgb,
    hsv_to_unit_rgb,
    np_unit_rgb_to_hsl,
    np_unit_rgb_to_hsv,
    np_hsl_to_unit_rgb,
    np_hsv_to_unit_rgb,
    np_rgb_to_hex,
    np_hex_to_rgb,
)

__version__ = "0.1.0"

__all__ = [
    # core color type
    "Color",
    "ColorRange",
    "ColorWheel",
    "Equivalence",
    # blend modes
    "screen",
    "overlay",
    "difference",
    "lighten",
    "darken",
    "invert",
    "mix",
    "blend",
    # random
    "random_color",
    "random_within",
    "random_colors",
    # named colors
    "WEB_COLORS",
    "lookup_web_color",
    "primary",
    # conversions
    "unit_rgb_to_hsl",
    "unit_rgb_to_hsv",
    "hsl_to_unit_rgb",
    "hsv_to_unit_rgb",
    "np_unit_rgb_to_hsl",
    "np_unit_rgb_to_hsv",
    "np_hsl_to_unit_rgb",
    "np_hsv_to_unit_rgb",
    "np_rgb_to_hex",
    "np_hex_to_rgb",
]
