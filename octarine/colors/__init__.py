"""
Octarine Color Type
===================

:class:`Color` is an immutable 8-bit RGB value. Importing this package also
attaches the arithmetic operators and blend modes to it.

Usage
-----
>>> from octarine.colors import Color
>>> red = Color.from_web_color("red")
>>> red.to_hex() == 0xFF0000
True
>>> Color(250, 250, 250) + Color(10, 10, 10)
Color(red=255, green=255, blue=255)
>>> red.screen(Color(10, 10, 10)).to_rgb()
(255, 10, 10)
"""

from .color import Color
from . import arithmetic  # noqa: F401  (attaches operators)
from .blend import (
    screen,
    overlay,
    difference,
    lighten,
    darken,
    invert,
    mix,
    blend,
    BLEND_MODES,
)
from .arithmetic import add, subtract, multiply, divide, scale
from .random import random_color, random_within, random_colors, ColorWheel, seed
from .ranges import ColorRange

__all__ = [
    'Color',
    'ColorRange',
    'ColorWheel',
    'add',
    'subtract',
    'multiply',
    'divide',
    'scale',
    'screen',
    'overlay',
    'difference',
    'lighten',
    'darken',
    'invert',
    'mix',
    'blend',
    'BLEND_MODES',
    'random_color',
    'random_within',
    'random_colors',
    'seed',
]
