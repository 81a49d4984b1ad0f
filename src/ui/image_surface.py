from __future__ import annotations

from pathlib import Path
from typing import Sequence

from PIL import Image, ImageDraw

try:
    from core.surface import Color, Point
except ModuleNotFoundError:
    from ..core.surface import Color, Point


class ImageSurface:
    """Headless surface drawing into a Pillow RGBA image."""

    def __init__(self, width: int, height: int):
        self._image = Image.new("RGBA", (max(1, int(width)), max(1, int(height))), (0, 0, 0, 255))
        self._draw = ImageDraw.Draw(self._image, "RGBA")
        self._fill: tuple[int, int, int, int] | None = (255, 255, 255, 255)
        self._stroke: tuple[int, int, int, int] | None = (0, 0, 0, 255)
        self._stroke_weight = 1.0

    @property
    def width(self) -> float:
        return float(self._image.width)

    @property
    def height(self) -> float:
        return float(self._image.height)

    @property
    def line_width(self) -> int:
        return max(1, int(round(self._stroke_weight)))

    def background(self, gray: int) -> None:
        self._draw.rectangle((0, 0, self._image.width, self._image.height), fill=(gray, gray, gray, 255))

    def fill(self, color: Color) -> None:
        self._fill = (color[0], color[1], color[2], 255)

    def no_fill(self) -> None:
        self._fill = None

    def stroke(self, color: Color, alpha: int = 255) -> None:
        self._stroke = (color[0], color[1], color[2], int(alpha))

    def no_stroke(self) -> None:
        self._stroke = None

    def stroke_weight(self, weight: float) -> None:
        self._stroke_weight = float(weight)

    def circle(self, x: float, y: float, diameter: float) -> None:
        if self._fill is None and self._stroke is None:
            return
        r = abs(diameter) / 2
        self._draw.ellipse(
            (x - r, y - r, x + r, y + r),
            fill=self._fill,
            outline=self._stroke,
            width=self.line_width if self._stroke is not None else 0,
        )

    def line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        if self._stroke is None:
            return
        self._draw.line([(x1, y1), (x2, y2)], fill=self._stroke, width=self.line_width)

    def polyline(self, points: Sequence[Point]) -> None:
        if self._stroke is None or len(points) < 2:
            return
        self._draw.line([(float(x), float(y)) for x, y in points], fill=self._stroke, width=self.line_width)

    def to_image(self) -> Image.Image:
        return self._image.copy()

    def save(self, path: Path | str) -> Path:
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        self._image.convert("RGB").save(target)
        return target
