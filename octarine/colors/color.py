from __future__ import annotations
from typing import Optional, Tuple, TYPE_CHECKING

from ..constants.web_colors import lookup_web_color, name_for_rgb
from ..conversions import (
    unit_rgb_to_hsl,
    unit_rgb_to_hsv,
    hsl_to_unit_rgb,
    hsv_to_unit_rgb,
    rgb_to_hex,
    hex_to_rgb,
    parse_hex_string,
    format_hex_string,
    clamp_channel,
    unit_to_byte,
    byte_to_unit,
)
from ..types.color_types import (
    RGBTuple,
    UnitRGBTuple,
    HSLTuple,
    HSVTuple,
    ChannelBounds,
    Equivalence,
)

if TYPE_CHECKING:
    from numpy.random import Generator
    from .ranges import ColorRange


class Color:
    """
    An immutable 8-bit RGB color.

    The (red, green, blue) bytes are the only stored state. HSL, HSV, hex and
    web color names are computed on demand, so converting from HSL/HSV and
    back is lossy:

    >>> Color.from_hsl(0.0, 0.0, 0.5).to_hsl() == (0.0, 0.0, 0.5)
    False

    Components are coerced with ``int()`` and clamped to [0, 255].
    """
    __slots__ = ('_value', '_frozen')  # prevents adding new attributes → immutability

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __delattr__(self, name):
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot delete {name}")

    def __init__(self, r: int, g: int, b: int) -> None:
        try:
            value = (clamp_channel(r), clamp_channel(g), clamp_channel(b))
        except (TypeError, ValueError, OverflowError) as e:
            raise TypeError(f"Color components must be integers, got {(r, g, b)!r}") from e
        self._value: RGBTuple = value
        # freeze instance; no more writes allowed
        super().__setattr__('_frozen', True)

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def new(cls, r: int, g: int, b: int) -> Color:
        return cls(r, g, b)

    @classmethod
    def from_rgb_float(cls, r: float, g: float, b: float) -> Color:
        """Create a color from unit floats; each channel is clamped to [0, 1]."""
        return cls(unit_to_byte(r), unit_to_byte(g), unit_to_byte(b))

    @classmethod
    def from_hex(cls, value: int) -> Color:
        """
        Create a color from a 24-bit integer such as ``0xFF0000``.

        Bits above the low 24 are ignored.
        """
        return cls(*hex_to_rgb(value))

    @classmethod
    def from_hex_string(cls, text: str) -> Color:
        """Create a color from ``"#RRGGBB"``, ``"RRGGBB"``, ``"0xRRGGBB"`` or ``"#RGB"``."""
        return cls.from_hex(parse_hex_string(text))

    @classmethod
    def from_hsl(cls, h: float, s: float, l: float) -> Color:
        """
        Create a color from HSL.

        Hue is in degrees and wraps around the circle (``h = 360`` is ``h = 0``).
        Saturation and luminance are clamped to [0, 1].
        """
        return cls.from_rgb_float(*hsl_to_unit_rgb(h, s, l))

    @classmethod
    def from_hsv(cls, h: float, s: float, v: float) -> Color:
        """
        Create a color from HSV.

        Hue is in degrees and wraps around the circle. Saturation and value
        are clamped to [0, 1].
        """
        return cls.from_rgb_float(*hsv_to_unit_rgb(h, s, v))

    @classmethod
    def from_web_color(cls, name: str) -> Optional[Color]:
        """Look up a W3C color keyword, ignoring case. Returns ``None`` for unknown names."""
        rgb = lookup_web_color(name)
        if rgb is None:
            return None
        return cls(*rgb)

    @classmethod
    def random(cls, rng: Optional[Generator] = None) -> Color:
        """A color with every channel drawn uniformly from [0, 255]."""
        from .random import random_color  # local import to avoid cycles
        return random_color(rng)

    @classmethod
    def random_within(cls, bounds: ChannelBounds, rng: Optional[Generator] = None) -> Color:
        """A color with each channel drawn uniformly from its closed ``(min, max)`` bound."""
        from .random import random_within
        return random_within(bounds, rng)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> RGBTuple:
        return self._value

    @property
    def red(self) -> int:
        return self._value[0]

    @property
    def green(self) -> int:
        return self._value[1]

    @property
    def blue(self) -> int:
        return self._value[2]

    def get_red(self) -> int:
        return self._value[0]

    def get_green(self) -> int:
        return self._value[1]

    def get_blue(self) -> int:
        return self._value[2]

    # ------------------ DERIVED VIEWS ------------------
    def to_rgb(self) -> RGBTuple:
        return self._value

    def to_rgb_float(self) -> UnitRGBTuple:
        r, g, b = self._value
        return byte_to_unit(r), byte_to_unit(g), byte_to_unit(b)

    def to_hex(self) -> int:
        """The color as ``R<<16 | G<<8 | B``, e.g. ``Color(100, 100, 100).to_hex() == 0x646464``."""
        return rgb_to_hex(*self._value)

    def to_hex_string(self) -> str:
        return format_hex_string(self.to_hex())

    def to_hsl(self) -> HSLTuple:
        """(hue in [0, 360), saturation, luminance). Achromatic colors have hue and saturation 0."""
        return unit_rgb_to_hsl(*self.to_rgb_float())

    def to_hsv(self) -> HSVTuple:
        """(hue in [0, 360), saturation, value). Achromatic colors have hue and saturation 0."""
        return unit_rgb_to_hsv(*self.to_rgb_float())

    def get_hsl_hue(self) -> float:
        return self.to_hsl()[0]

    def get_hsl_saturation(self) -> float:
        return self.to_hsl()[1]

    def get_hsl_luminance(self) -> float:
        return self.to_hsl()[2]

    def get_hsv_hue(self) -> float:
        return self.to_hsv()[0]

    def get_hsv_saturation(self) -> float:
        return self.to_hsv()[1]

    def get_hsv_value(self) -> float:
        return self.to_hsv()[2]

    def get_web_color(self) -> Optional[str]:
        """The W3C keyword for exactly this color, or ``None``."""
        return name_for_rgb(self._value)

    # ------------------ MODIFIERS ------------------
    # Each returns a new instance; the receiver is never changed.
    def with_red(self, red: int) -> Color:
        return self.__class__(red, self.green, self.blue)

    def with_green(self, green: int) -> Color:
        return self.__class__(self.red, green, self.blue)

    def with_blue(self, blue: int) -> Color:
        return self.__class__(self.red, self.green, blue)

    def with_hsl_hue(self, hue: float) -> Color:
        _, s, l = self.to_hsl()
        return self.from_hsl(hue, s, l)

    def with_hsl_saturation(self, saturation: float) -> Color:
        h, _, l = self.to_hsl()
        return self.from_hsl(h, saturation, l)

    def with_hsl_luminance(self, luminance: float) -> Color:
        h, s, _ = self.to_hsl()
        return self.from_hsl(h, s, luminance)

    def with_hsv_hue(self, hue: float) -> Color:
        _, s, v = self.to_hsv()
        return self.from_hsv(hue, s, v)

    def with_hsv_saturation(self, saturation: float) -> Color:
        h, _, v = self.to_hsv()
        return self.from_hsv(h, saturation, v)

    def with_hsv_value(self, value: float) -> Color:
        h, s, _ = self.to_hsv()
        return self.from_hsv(h, s, value)

    def range_to(self, end: Color, steps: int) -> ColorRange:
        """
        Iterate over ``steps`` colors from this one to ``end``, interpolated in HSL.

        Both ends are included:

        >>> [c.to_hex_string() for c in Color(0, 0, 0).range_to(Color(255, 255, 255), 3)]
        ['#000000', '#808080', '#ffffff']
        """
        from .ranges import ColorRange
        return ColorRange(self, end, steps)

    # ------------------ COMPARISON ------------------
    def complex_eq(self, other: Color, equivalence: Equivalence = Equivalence.RGB) -> bool:
        """
        Compare two colors through their RGB, HSL or HSV representation.

        ``==`` always compares RGB.
        """
        equivalence = Equivalence(equivalence)
        if equivalence is Equivalence.HSL:
            return self.to_hsl() == other.to_hsl()
        if equivalence is Equivalence.HSV:
            return self.to_hsv() == other.to_hsv()
        return self._value == other._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    # ------------------ REPRESENTATION ------------------
    def __iter__(self):
        return iter(self._value)

    def __repr__(self) -> str:
        r, g, b = self._value
        return f"{self.__class__.__name__}(red={r}, green={g}, blue={b})"

    def __str__(self) -> str:
        return ", ".join(str(c) for c in self._value)

    def __reduce__(self) -> Tuple[type, RGBTuple]:
        return self.__class__, self._value
