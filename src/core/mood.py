from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Mood(Enum):
    """Moods offered in the dropdown."""

    HAPPY = "happy"
    SAD = "sad"
    ANXIOUS = "anxious"
    EXCITED = "excited"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @classmethod
    def parse(cls, value: Any) -> Mood | None:
        if isinstance(value, Mood):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


DEFAULT_MOOD = Mood.HAPPY


@dataclass(frozen=True, slots=True)
class MoodEvent:
    """One entry of the persisted mood history."""

    mood: Mood
    timestamp: str

    def to_dict(self) -> dict[str, str]:
        return {"mood": self.mood.value, "timestamp": self.timestamp}

    @classmethod
    def from_dict(cls, payload: Any) -> MoodEvent:
        if not isinstance(payload, dict):
            raise ValueError(f"mood event must be an object, got {type(payload).__name__}")
        mood = Mood.parse(payload.get("mood"))
        if mood is None:
            raise ValueError(f"unknown mood in history: {payload.get('mood')!r}")
        timestamp = payload.get("timestamp")
        if not isinstance(timestamp, str) or not timestamp.strip():
            raise ValueError("mood event timestamp missing")
        return cls(mood=mood, timestamp=timestamp)
