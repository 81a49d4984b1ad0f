from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Callable

from .mood import DEFAULT_MOOD, Mood, MoodEvent
from .storage import KeyValueStore

logger = logging.getLogger("Moodscape")

MOOD_KEY = "mood"
HISTORY_KEY = "moodHistory"


def iso_timestamp(moment: datetime) -> str:
    """UTC ISO-8601 with milliseconds and a trailing Z, e.g. 2024-05-01T12:00:00.000Z."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    utc = moment.astimezone(timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class MoodStore:
    """Current mood plus its append-only history, kept in a key/value store."""

    def __init__(self, store: KeyValueStore, clock: Callable[[], datetime] | None = None):
        self._store = store
        self._clock = clock or _utc_now
        self._current = DEFAULT_MOOD
        self._history: list[MoodEvent] = []
        # events whose history write failed; retried with the next record()
        self._pending: list[MoodEvent] = []

    @property
    def current_mood(self) -> Mood:
        return self._current

    @property
    def history(self) -> tuple[MoodEvent, ...]:
        return tuple(self._history)

    @property
    def pending_events(self) -> int:
        return len(self._pending)

    def load(self) -> Mood:
        saved = self._store.get(MOOD_KEY)
        mood = Mood.parse(saved) if saved else None
        if saved and mood is None:
            logger.warning("Ignoring unknown saved mood %r", saved)
        self._current = mood or DEFAULT_MOOD
        self._history = self._read_history()
        logger.info("Loaded mood=%s history=%d", self._current.value, len(self._history))
        return self._current

    def record(self, mood: Mood) -> MoodEvent:
        """
        Append one event to the stored history, then overwrite the current mood.

        If the history cannot be written the stored mood is left alone and the
        event stays pending, so a later successful write still contains it.
        """
        event = MoodEvent(mood=mood, timestamp=iso_timestamp(self._clock()))
        self._pending.append(event)
        history = self._read_history() + self._pending
        self._history = history
        self._current = mood

        payload = json.dumps([item.to_dict() for item in history], ensure_ascii=False)
        if not self._store.set(HISTORY_KEY, payload):
            logger.warning("Mood history not persisted for %s; %d event(s) pending", mood.value, len(self._pending))
            return event
        self._pending.clear()
        if not self._store.set(MOOD_KEY, mood.value):
            logger.warning("Current mood not persisted: %s", mood.value)
        return event

    def _read_history(self) -> list[MoodEvent]:
        raw = self._store.get(HISTORY_KEY)
        if not raw:
            return []
        try:
            payload = json.loads(raw)
            if not isinstance(payload, list):
                raise ValueError(f"history must be a list, got {type(payload).__name__}")
            return [MoodEvent.from_dict(item) for item in payload]
        except (json.JSONDecodeError, ValueError) as exc:
            logger.warning("Discarding malformed mood history: %s", exc)
            return []
