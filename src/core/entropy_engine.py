from __future__ import annotations

import random


class EntropyEngine:
    """Random source for entity construction and motion; swap it out in tests."""

    def __init__(self, seed: int | None = None):
        self._rng = random.Random(seed)

    def uniform(self, low: float, high: float) -> float:
        return self._rng.uniform(low, high)

    def chance(self, probability: float) -> bool:
        return self._rng.random() < probability
