from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Vector2:
    """2D point/velocity, mutated in place by the owning entity."""

    x: float = 0.0
    y: float = 0.0

    def add(self, other: Vector2) -> Vector2:
        self.x += other.x
        self.y += other.y
        return self

    def copy(self) -> Vector2:
        return Vector2(self.x, self.y)

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)


@dataclass(slots=True)
class CanvasBounds:
    """Live drawing-surface size shared by every entity of a scene."""

    width: float
    height: float

    def resize(self, width: float, height: float) -> None:
        self.width = max(0.0, float(width))
        self.height = max(0.0, float(height))


def canvas_size_for_viewport(
    viewport_width: int,
    viewport_height: int,
    reserved_strip: int = 100,
) -> tuple[int, int]:
    """Canvas fills the viewport except the control strip at the bottom."""
    return max(0, int(viewport_width)), max(0, int(viewport_height) - int(reserved_strip))
