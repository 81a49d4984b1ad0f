from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Sequence

from .config_manager import AnimationConfig
from .entities import AnxiousLine, MoodEntity, Particle, Star, Wave
from .entropy_engine import EntropyEngine
from .geometry import CanvasBounds
from .mood import DEFAULT_MOOD, Mood
from .surface import Surface

logger = logging.getLogger("Moodscape")

BACKGROUND_GRAY = 240


@dataclass
class MoodScene:
    """One entity collection per mood, built once at startup."""

    particles: list[Particle] = field(default_factory=list)
    waves: list[Wave] = field(default_factory=list)
    lines: list[AnxiousLine] = field(default_factory=list)
    stars: list[Star] = field(default_factory=list)

    @classmethod
    def build(cls, bounds: CanvasBounds, entropy: EntropyEngine, config: AnimationConfig) -> MoodScene:
        return cls(
            particles=[Particle(bounds, entropy) for _ in range(config.particle_count)],
            waves=[Wave(bounds, i * 100) for i in range(config.wave_count)],
            lines=[AnxiousLine(bounds, entropy) for _ in range(config.line_count)],
            stars=[Star(bounds, entropy) for _ in range(config.star_count)],
        )

    def collection_for(self, mood: Mood) -> Sequence[MoodEntity]:
        return {
            Mood.HAPPY: self.particles,
            Mood.SAD: self.waves,
            Mood.ANXIOUS: self.lines,
            Mood.EXCITED: self.stars,
        }[mood]


class Animator:
    """
    Per-frame draw loop.

    Each frame clears the surface and renders only the collection of the
    current mood; the other collections stay frozen until selected again.
    """

    def __init__(
        self,
        bounds: CanvasBounds,
        *,
        entropy: EntropyEngine | None = None,
        config: AnimationConfig | None = None,
        scene: MoodScene | None = None,
        mood: Mood = DEFAULT_MOOD,
        background_gray: int = BACKGROUND_GRAY,
    ):
        self._bounds = bounds
        self._entropy = entropy or EntropyEngine()
        self._config = config or AnimationConfig()
        self._scene = scene or MoodScene.build(bounds, self._entropy, self._config)
        self._mood = mood
        self._background_gray = background_gray
        self._frame_count = 0
        self._excited_frames = 0
        self._passes: dict[Mood, Callable[[Surface], None]] = {
            Mood.HAPPY: self._draw_happy,
            Mood.SAD: self._draw_sad,
            Mood.ANXIOUS: self._draw_anxious,
            Mood.EXCITED: self._draw_excited,
        }

    @property
    def scene(self) -> MoodScene:
        return self._scene

    @property
    def bounds(self) -> CanvasBounds:
        return self._bounds

    @property
    def current_mood(self) -> Mood:
        return self._mood

    @property
    def frame_count(self) -> int:
        return self._frame_count

    def set_mood(self, mood: Mood) -> None:
        if mood != self._mood:
            logger.debug("Animator mood %s -> %s", self._mood.value, mood.value)
        self._mood = mood

    def population(self, mood: Mood) -> int:
        return len(self._scene.collection_for(mood))

    def resize(self, width: float, height: float) -> None:
        # Entities keep their positions; only the bounds they read change.
        self._bounds.resize(width, height)

    def draw_frame(self, surface: Surface) -> None:
        self._frame_count += 1
        surface.background(self._background_gray)
        self._passes[self._mood](surface)

    def _draw_happy(self, surface: Surface) -> None:
        for particle in self._scene.particles:
            particle.update()
            particle.display(surface)

    def _draw_sad(self, surface: Surface) -> None:
        for wave in self._scene.waves:
            wave.display(surface)

    def _draw_anxious(self, surface: Surface) -> None:
        for line in self._scene.lines:
            line.display(surface)

    def _draw_excited(self, surface: Surface) -> None:
        stars = self._scene.stars
        self._excited_frames += 1
        if self._excited_frames % self._config.star_spawn_interval_frames == 0:
            stars.append(Star(self._bounds, self._entropy))
        while len(stars) > self._config.max_stars:
            del stars[0]

        for star in stars:
            star.update()
            star.display(surface)
