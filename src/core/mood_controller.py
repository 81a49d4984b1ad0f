from __future__ import annotations

import logging

from PySide6.QtCore import QObject, Signal

from .animator import Animator
from .mood import Mood, MoodEvent
from .mood_store import MoodStore

logger = logging.getLogger("Moodscape")


class MoodController(QObject):
    """Routes mood selections into the store and the animator."""

    mood_changed = Signal(object)

    def __init__(self, store: MoodStore, animator: Animator, parent=None):
        super().__init__(parent)
        self._store = store
        self._animator = animator

    @property
    def current_mood(self) -> Mood:
        return self._animator.current_mood

    def restore(self) -> Mood:
        mood = self._store.load()
        self._animator.set_mood(mood)
        self.mood_changed.emit(mood)
        return mood

    def select(self, value: Mood | str) -> MoodEvent | None:
        mood = Mood.parse(value)
        if mood is None:
            logger.warning("Ignoring unknown mood selection %r", value)
            return None
        event = self._store.record(mood)
        self._animator.set_mood(mood)
        logger.info("Mood set to %s at %s", mood.value, event.timestamp)
        self.mood_changed.emit(mood)
        return event
