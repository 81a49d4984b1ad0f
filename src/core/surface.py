from __future__ import annotations

from typing import Protocol, Sequence

Color = tuple[int, int, int]
Point = tuple[float, float]


class Surface(Protocol):
    """
    Drawing primitives the animator renders through.

    Style state (fill, stroke, stroke weight) persists until changed.
    """

    @property
    def width(self) -> float: ...

    @property
    def height(self) -> float: ...

    def background(self, gray: int) -> None: ...

    def fill(self, color: Color) -> None: ...

    def no_fill(self) -> None: ...

    def stroke(self, color: Color, alpha: int = 255) -> None: ...

    def no_stroke(self) -> None: ...

    def stroke_weight(self, weight: float) -> None: ...

    def circle(self, x: float, y: float, diameter: float) -> None: ...

    def line(self, x1: float, y1: float, x2: float, y2: float) -> None: ...

    def polyline(self, points: Sequence[Point]) -> None: ...


def clamp_channel(value: float) -> int:
    return max(0, min(255, int(value)))
