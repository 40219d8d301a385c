from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .color import Color


class ColorRange:
    """
    Iterator over the color scale between two colors.

    The scale is a straight line in HSL space from the start color to the end
    color, with both ends included. Hue is interpolated linearly, not along
    the shortest arc. Build one with :meth:`Color.range_to`.

    >>> from octarine import Color
    >>> [c.to_rgb() for c in Color(255, 0, 0).range_to(Color(0, 255, 0), 5)]
    [(255, 0, 0), (255, 128, 0), (255, 255, 0), (128, 255, 0), (0, 255, 0)]
    """

    def __init__(self, start: Color, end: Color, steps: int) -> None:
        if steps < 1:
            raise ValueError(f"A color range needs at least one step, got {steps}")
        self.total_steps = steps
        self.current_step = 0
        self.start_hsl = start.to_hsl()
        self._color_cls = type(start)
        intervals = steps - 1
        if intervals > 0:
            end_hsl = end.to_hsl()
            self.step = tuple((e - s) / intervals for s, e in zip(self.start_hsl, end_hsl))
        else:
            self.step = (0.0, 0.0, 0.0)

    def __iter__(self) -> ColorRange:
        return self

    def __next__(self) -> Color:
        if self.current_step >= self.total_steps:
            raise StopIteration
        h, s, l = (
            start + delta * self.current_step
            for start, delta in zip(self.start_hsl, self.step)
        )
        self.current_step += 1
        return self._color_cls.from_hsl(h, s, l)

    def __len__(self) -> int:
        return self.total_steps - self.current_step
