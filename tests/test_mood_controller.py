from __future__ import annotations

import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT / "src") not in sys.path:
    sys.path.insert(0, str(ROOT / "src"))

from core.animator import Animator
from core.entropy_engine import EntropyEngine
from core.geometry import CanvasBounds
from core.mood import Mood
from core.mood_controller import MoodController
from core.mood_store import MoodStore
from core.storage import MemoryStore


class _NullSurface:
    width = 640
    height = 480

    def __getattr__(self, name: str):
        return lambda *args: None


class MoodControllerTest(unittest.TestCase):
    def setUp(self) -> None:
        self.backend = MemoryStore()
        self.store = MoodStore(self.backend)
        self.animator = Animator(CanvasBounds(640, 480), entropy=EntropyEngine(seed=3))
        self.controller = MoodController(self.store, self.animator)
        self.changes: list[Mood] = []
        self.controller.mood_changed.connect(self.changes.append)

    def test_fresh_store_restores_happy(self) -> None:
        self.assertEqual(self.controller.restore(), Mood.HAPPY)
        self.assertEqual(self.animator.current_mood, Mood.HAPPY)
        self.assertEqual(self.store.history, ())
        self.assertEqual(self.changes, [Mood.HAPPY])

    def test_restore_applies_saved_mood(self) -> None:
        self.backend.set("mood", "anxious")
        self.controller.restore()
        self.assertEqual(self.animator.current_mood, Mood.ANXIOUS)

    def test_select_accepts_strings_and_ignores_unknown(self) -> None:
        self.controller.restore()
        self.assertIsNotNone(self.controller.select("sad"))
        self.assertEqual(self.controller.current_mood, Mood.SAD)

        self.assertIsNone(self.controller.select("bored"))
        self.assertEqual(self.controller.current_mood, Mood.SAD)
        self.assertEqual(len(self.store.history), 1)
        self.assertEqual(self.changes, [Mood.HAPPY, Mood.SAD])

    def test_end_to_end_session(self) -> None:
        surface = _NullSurface()
        self.controller.restore()

        first = self.controller.select(Mood.EXCITED)
        self.assertEqual(self.backend.get("mood"), "excited")
        self.assertEqual([e.mood for e in self.store.history], [Mood.EXCITED])

        for _ in range(40):
            self.animator.draw_frame(surface)
        self.assertEqual(self.animator.population(Mood.EXCITED), 101)

        offsets = [wave.offset for wave in self.animator.scene.waves]
        second = self.controller.select(Mood.SAD)
        self.assertEqual(self.store.history, (first, second))
        self.assertLessEqual(first.timestamp, second.timestamp)

        self.animator.draw_frame(surface)
        self.assertEqual(self.animator.population(Mood.EXCITED), 101)
        self.assertEqual([wave.offset for wave in self.animator.scene.waves], [o + 1 for o in offsets])


if __name__ == "__main__":
    unittest.main()
