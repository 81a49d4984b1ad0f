from __future__ import annotations

from typing import Sequence

from PySide6.QtCore import QPointF, Qt
from PySide6.QtGui import QBrush, QColor, QPainter, QPen, QPolygonF

try:
    from core.surface import Color, Point
except ModuleNotFoundError:
    from ..core.surface import Color, Point


class PainterSurface:
    """Surface backed by a live QPainter for the duration of one paint event."""

    def __init__(self, painter: QPainter, width: float, height: float):
        self._painter = painter
        self._width = float(width)
        self._height = float(height)
        self._pen = QPen(QColor(0, 0, 0))
        self._pen.setWidthF(1.0)
        self._pen.setCapStyle(Qt.PenCapStyle.RoundCap)
        self._stroke_enabled = True
        self._brush = QBrush(QColor(255, 255, 255))
        painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)
        self._apply()

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    def _apply(self) -> None:
        self._painter.setPen(self._pen if self._stroke_enabled else QPen(Qt.PenStyle.NoPen))
        self._painter.setBrush(self._brush)

    def background(self, gray: int) -> None:
        self._painter.fillRect(0, 0, int(self._width) + 1, int(self._height) + 1, QColor(gray, gray, gray))

    def fill(self, color: Color) -> None:
        self._brush = QBrush(QColor(*color))
        self._apply()

    def no_fill(self) -> None:
        self._brush = QBrush(Qt.BrushStyle.NoBrush)
        self._apply()

    def stroke(self, color: Color, alpha: int = 255) -> None:
        self._pen.setColor(QColor(color[0], color[1], color[2], alpha))
        self._stroke_enabled = True
        self._apply()

    def no_stroke(self) -> None:
        self._stroke_enabled = False
        self._apply()

    def stroke_weight(self, weight: float) -> None:
        self._pen.setWidthF(float(weight))
        self._apply()

    def circle(self, x: float, y: float, diameter: float) -> None:
        radius = diameter / 2
        self._painter.drawEllipse(QPointF(x, y), radius, radius)

    def line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        self._painter.drawLine(QPointF(x1, y1), QPointF(x2, y2))

    def polyline(self, points: Sequence[Point]) -> None:
        if len(points) < 2:
            return
        self._painter.drawPolyline(QPolygonF([QPointF(x, y) for x, y in points]))
