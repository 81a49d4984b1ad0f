"""
Mood visualization entities.

Particle and Star have a separate update step. Wave and AnxiousLine advance
their phase inside display(), so they only move while their mood is rendered.
"""

from __future__ import annotations

import math
from collections import deque
from typing import Protocol

from .entropy_engine import EntropyEngine
from .geometry import CanvasBounds, Vector2
from .surface import Color, Surface, clamp_channel

TWO_PI = math.pi * 2


class MoodEntity(Protocol):
    def display(self, surface: Surface) -> None: ...


class Particle:
    """Pastel bubble bouncing off the canvas edges (happy)."""

    MAX_SPEED = 2.0
    MIN_SIZE = 10.0
    MAX_SIZE = 30.0

    def __init__(self, bounds: CanvasBounds, entropy: EntropyEngine):
        self._bounds = bounds
        self.pos = Vector2(entropy.uniform(0, bounds.width), entropy.uniform(0, bounds.height))
        self.vel = Vector2(
            entropy.uniform(-self.MAX_SPEED, self.MAX_SPEED),
            entropy.uniform(-self.MAX_SPEED, self.MAX_SPEED),
        )
        self.size = entropy.uniform(self.MIN_SIZE, self.MAX_SIZE)
        self.color: Color = (
            clamp_channel(entropy.uniform(200, 255)),
            clamp_channel(entropy.uniform(200, 255)),
            clamp_channel(entropy.uniform(100, 200)),
        )

    def update(self) -> None:
        self.pos.add(self.vel)
        # Position is left outside for this frame; only heading outward flips.
        if (self.pos.x < 0 and self.vel.x < 0) or (self.pos.x > self._bounds.width and self.vel.x > 0):
            self.vel.x *= -1
        if (self.pos.y < 0 and self.vel.y < 0) or (self.pos.y > self._bounds.height and self.vel.y > 0):
            self.vel.y *= -1

    def display(self, surface: Surface) -> None:
        surface.fill(self.color)
        surface.no_stroke()
        surface.circle(self.pos.x, self.pos.y, self.size)


class Wave:
    """Horizontal sine wave drifting sideways (sad)."""

    COLOR: Color = (100, 150, 255)
    SAMPLE_STEP = 10

    def __init__(self, bounds: CanvasBounds, offset: float):
        self._bounds = bounds
        self.offset = float(offset)
        self.amplitude = 50.0
        self.period = 200.0
        self.speed = 0.02

    def sample_points(self) -> list[tuple[float, float]]:
        mid = self._bounds.height / 2
        points: list[tuple[float, float]] = []
        x = 0
        while x < self._bounds.width:
            y = math.sin((x + self.offset) * self.speed) * self.amplitude + mid
            points.append((float(x), y))
            x += self.SAMPLE_STEP
        return points

    def display(self, surface: Surface) -> None:
        surface.stroke(self.COLOR)
        surface.no_fill()
        surface.polyline(self.sample_points())
        self.offset += 1


class AnxiousLine:
    """Slowly rotating segment that shakes on every frame (anxious)."""

    COLOR: Color = (150, 100, 100)
    JITTER = 5.0
    ROTATION_STEP = 0.02

    def __init__(self, bounds: CanvasBounds, entropy: EntropyEngine):
        self._entropy = entropy
        self.origin = Vector2(entropy.uniform(0, bounds.width), entropy.uniform(0, bounds.height))
        self.length = entropy.uniform(50, 150)
        self.angle = entropy.uniform(0, TWO_PI)
        self.jitter = 0.0

    def endpoints(self) -> tuple[float, float, float, float]:
        j = self.jitter
        return (
            self.origin.x + j,
            self.origin.y + j,
            self.origin.x + math.cos(self.angle) * self.length + j,
            self.origin.y + math.sin(self.angle) * self.length + j,
        )

    def display(self, surface: Surface) -> None:
        self.jitter = self._entropy.uniform(-self.JITTER, self.JITTER)
        surface.stroke(self.COLOR)
        surface.line(*self.endpoints())
        self.angle += self.ROTATION_STEP


class Star:
    """Shooting star with a short fading trail (excited)."""

    MAX_TRAIL_LENGTH = 5
    TURN_PROBABILITY = 0.02
    MAX_TURN = math.pi / 4
    GLOW: Color = (255, 255, 0)
    TRAIL_ALPHA_RANGE = (50, 255)

    def __init__(self, bounds: CanvasBounds, entropy: EntropyEngine):
        self._bounds = bounds
        self._entropy = entropy
        self.pos = Vector2(entropy.uniform(0, bounds.width), entropy.uniform(0, bounds.height))
        self.size = entropy.uniform(3, 8)
        self.speed = entropy.uniform(3, 8)
        self.angle = entropy.uniform(0, TWO_PI)
        self.color: Color = (
            255,
            clamp_channel(entropy.uniform(200, 255)),
            clamp_channel(entropy.uniform(100, 200)),
        )
        self.trail: deque[Vector2] = deque()

    def update(self) -> None:
        self.trail.append(self.pos.copy())
        while len(self.trail) > self.MAX_TRAIL_LENGTH:
            self.trail.popleft()

        self.pos.x += math.cos(self.angle) * self.speed
        self.pos.y += math.sin(self.angle) * self.speed

        width = self._bounds.width
        height = self._bounds.height
        if self.pos.x < 0:
            self.pos.x = width
        elif self.pos.x > width:
            self.pos.x = 0.0
        if self.pos.y < 0:
            self.pos.y = height
        elif self.pos.y > height:
            self.pos.y = 0.0

        if self._entropy.chance(self.TURN_PROBABILITY):
            self.angle += self._entropy.uniform(-self.MAX_TURN, self.MAX_TURN)

    def trail_alphas(self) -> list[int]:
        """Alpha per trail segment, oldest first."""
        segments = len(self.trail) - 1
        if segments <= 0:
            return []
        low, high = self.TRAIL_ALPHA_RANGE
        return [int(round(low + (high - low) * i / segments)) for i in range(segments)]

    def point_segments(self) -> list[tuple[float, float, float, float]]:
        segments: list[tuple[float, float, float, float]] = []
        inner = self.size * 0.4
        for k in range(5):
            angle = TWO_PI * k / 5 - math.pi / 2
            segments.append(
                (
                    self.pos.x + math.cos(angle) * self.size,
                    self.pos.y + math.sin(angle) * self.size,
                    self.pos.x + math.cos(angle + math.pi / 5) * inner,
                    self.pos.y + math.sin(angle + math.pi / 5) * inner,
                )
            )
        return segments

    def display(self, surface: Surface) -> None:
        trail = list(self.trail)
        surface.stroke_weight(2)
        for i, alpha in enumerate(self.trail_alphas()):
            surface.stroke(self.GLOW, alpha)
            surface.line(trail[i].x, trail[i].y, trail[i + 1].x, trail[i + 1].y)

        surface.fill(self.color)
        surface.no_stroke()
        surface.circle(self.pos.x, self.pos.y, self.size)

        surface.stroke(self.GLOW)
        surface.stroke_weight(1)
        for segment in self.point_segments():
            surface.line(*segment)
