from __future__ import annotations
from enum import Enum
from typing import Tuple

RGBTuple = Tuple[int, int, int]
UnitRGBTuple = Tuple[float, float, float]
HSLTuple = Tuple[float, float, float]
HSVTuple = Tuple[float, float, float]
ChannelBound = Tuple[int, int]
ChannelBounds = Tuple[ChannelBound, ChannelBound, ChannelBound]


class Equivalence(str, Enum):
    """Representation used by ``Color.complex_eq`` to compare two colors."""
    RGB = "rgb"
    HSL = "hsl"
    HSV = "hsv"
