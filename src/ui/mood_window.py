"""
Mood window.

A canvas that repaints on a timer above a fixed-height strip holding the
mood dropdown and the "Set Mood" button.
"""

from __future__ import annotations

from PySide6.QtCore import QTimer, Signal
from PySide6.QtGui import QPainter
from PySide6.QtWidgets import QComboBox, QHBoxLayout, QPushButton, QSizePolicy, QVBoxLayout, QWidget

try:
    from core.animator import Animator
    from core.config_manager import AppConfig
    from core.geometry import canvas_size_for_viewport
    from core.mood import Mood
    from ui.painter_surface import PainterSurface
except ModuleNotFoundError:
    from ..core.animator import Animator
    from ..core.config_manager import AppConfig
    from ..core.geometry import canvas_size_for_viewport
    from ..core.mood import Mood
    from .painter_surface import PainterSurface


class MoodControls(QWidget):
    """Dropdown plus confirm button; emits the chosen mood on click."""

    mood_selected = Signal(object)

    def __init__(self, strip_height: int = 100, parent: QWidget | None = None):
        super().__init__(parent)
        self.setFixedHeight(max(0, strip_height))

        self._combo = QComboBox(self)
        for mood in Mood:
            self._combo.addItem(mood.label, mood.value)

        self._button = QPushButton("Set Mood", self)
        self._button.clicked.connect(self._on_set_clicked)

        layout = QHBoxLayout(self)
        layout.addStretch(1)
        layout.addWidget(self._combo)
        layout.addWidget(self._button)
        layout.addStretch(1)

    def selected_mood(self) -> Mood:
        return Mood.parse(self._combo.currentData()) or Mood.HAPPY

    def set_current_mood(self, mood: Mood) -> None:
        index = self._combo.findData(mood.value)
        if index >= 0 and index != self._combo.currentIndex():
            self._combo.setCurrentIndex(index)

    def _on_set_clicked(self) -> None:
        self.mood_selected.emit(self.selected_mood())


class MoodCanvas(QWidget):
    """Draws one animator frame per paint event; a QTimer schedules repaints."""

    def __init__(self, animator: Animator, frame_interval_ms: int = 16, parent: QWidget | None = None):
        super().__init__(parent)
        self._animator = animator
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self._frame_timer = QTimer(self)
        self._frame_timer.setInterval(max(1, frame_interval_ms))
        self._frame_timer.timeout.connect(self.update)

    @property
    def is_running(self) -> bool:
        return self._frame_timer.isActive()

    def start(self) -> None:
        self._frame_timer.start()

    def stop(self) -> None:
        self._frame_timer.stop()

    def paintEvent(self, event) -> None:
        painter = QPainter(self)
        try:
            surface = PainterSurface(painter, self.width(), self.height())
            self._animator.draw_frame(surface)
        finally:
            painter.end()

    def resizeEvent(self, event) -> None:
        size = event.size()
        self._animator.resize(size.width(), size.height())
        super().resizeEvent(event)


class MoodWindow(QWidget):
    """Top-level window: animated canvas above the mood controls."""

    def __init__(self, animator: Animator, config: AppConfig | None = None, parent: QWidget | None = None):
        super().__init__(parent)
        self._config = config or AppConfig()
        self.setWindowTitle("Moodscape")

        self._canvas = MoodCanvas(animator, self._config.animation.frame_interval_ms, self)
        self._controls = MoodControls(self._config.canvas.reserved_strip_height, self)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)
        layout.addWidget(self._canvas, 1)
        layout.addWidget(self._controls)

    @property
    def canvas(self) -> MoodCanvas:
        return self._canvas

    @property
    def controls(self) -> MoodControls:
        return self._controls

    def fit_to_viewport(self, viewport_width: int, viewport_height: int) -> tuple[int, int]:
        """Size the window to the viewport; returns the resulting canvas size."""
        strip = self._config.canvas.reserved_strip_height
        canvas_w, canvas_h = canvas_size_for_viewport(viewport_width, viewport_height, strip)
        self.resize(canvas_w, canvas_h + strip)
        return canvas_w, canvas_h
