from __future__ import annotations

import math
import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT / "src") not in sys.path:
    sys.path.insert(0, str(ROOT / "src"))

from core.entities import AnxiousLine, Particle, Star, Wave
from core.entropy_engine import EntropyEngine
from core.geometry import CanvasBounds, Vector2


class _ScriptedEntropy(EntropyEngine):
    """Replays queued samples; falls back to the range midpoint / no chance."""

    def __init__(self, values=(), chances=()):
        super().__init__(seed=0)
        self._values = list(values)
        self._chances = list(chances)

    def uniform(self, low: float, high: float) -> float:
        if self._values:
            return self._values.pop(0)
        return (low + high) / 2

    def chance(self, probability: float) -> bool:
        if self._chances:
            return self._chances.pop(0)
        return False


class _RecordingSurface:
    def __init__(self, width: float = 100, height: float = 100) -> None:
        self.width = width
        self.height = height
        self.calls: list[tuple] = []

    def __getattr__(self, name: str):
        def _record(*args):
            self.calls.append((name, *args))

        return _record

    def named(self, name: str) -> list[tuple]:
        return [call for call in self.calls if call[0] == name]


class ParticleTest(unittest.TestCase):
    def test_construction_draw_order(self) -> None:
        bounds = CanvasBounds(100, 100)
        particle = Particle(bounds, _ScriptedEntropy([99, 50, 2, 0, 20, 210.7, 220, 150]))
        self.assertEqual((particle.pos.x, particle.pos.y), (99, 50))
        self.assertEqual((particle.vel.x, particle.vel.y), (2, 0))
        self.assertEqual(particle.size, 20)
        self.assertEqual(particle.color, (210, 220, 150))

    def test_reflects_after_crossing_without_clamping(self) -> None:
        bounds = CanvasBounds(100, 100)
        particle = Particle(bounds, _ScriptedEntropy([99, 50, 2, 0, 20]))

        particle.update()
        self.assertEqual(particle.pos.x, 101)
        self.assertEqual(particle.vel.x, -2)

        particle.update()
        self.assertEqual(particle.pos.x, 99)
        self.assertEqual(particle.vel.x, -2)

    def test_slow_particle_flips_once_per_crossing(self) -> None:
        bounds = CanvasBounds(100, 100)
        particle = Particle(bounds, _ScriptedEntropy())
        particle.pos = Vector2(-0.4, 50)
        particle.vel = Vector2(-0.5, 0)

        flips = 0
        previous = particle.vel.x
        for _ in range(4):
            particle.update()
            if particle.vel.x != previous:
                flips += 1
                previous = particle.vel.x
        self.assertEqual(flips, 1)
        self.assertGreater(particle.pos.x, 0)

    def test_axes_reflect_independently(self) -> None:
        bounds = CanvasBounds(100, 100)
        particle = Particle(bounds, _ScriptedEntropy([50, 1, 1, -2, 20]))
        particle.update()
        self.assertEqual(particle.vel.x, 1)
        self.assertEqual(particle.vel.y, 2)

    def test_display_draws_filled_circle(self) -> None:
        surface = _RecordingSurface()
        particle = Particle(CanvasBounds(100, 100), _ScriptedEntropy([10, 20, 0, 0, 15, 200, 201, 120]))
        particle.display(surface)
        self.assertEqual(
            surface.calls,
            [("fill", (200, 201, 120)), ("no_stroke",), ("circle", 10, 20, 15)],
        )


class WaveTest(unittest.TestCase):
    def test_display_samples_every_ten_pixels_then_advances(self) -> None:
        surface = _RecordingSurface(30, 200)
        wave = Wave(CanvasBounds(30, 200), 100)

        wave.display(surface)

        polylines = surface.named("polyline")
        self.assertEqual(len(polylines), 1)
        points = polylines[0][1]
        self.assertEqual([x for x, _ in points], [0.0, 10.0, 20.0])
        for x, y in points:
            self.assertAlmostEqual(y, math.sin((x + 100) * 0.02) * 50 + 100)
        self.assertEqual(wave.offset, 101)
        self.assertIn(("stroke", (100, 150, 255)), surface.calls)
        self.assertIn(("no_fill",), surface.calls)

    def test_phase_only_moves_when_displayed(self) -> None:
        wave = Wave(CanvasBounds(50, 50), 300)
        wave.sample_points()
        self.assertEqual(wave.offset, 300)
        self.assertEqual(wave.period, 200)


class AnxiousLineTest(unittest.TestCase):
    def test_jitter_is_redrawn_every_display(self) -> None:
        entropy = _ScriptedEntropy([10, 20, 100, 0.0, 3.0])
        line = AnxiousLine(CanvasBounds(200, 200), entropy)
        self.assertEqual(line.jitter, 0)

        surface = _RecordingSurface()
        line.display(surface)
        first = surface.named("line")[0]
        self.assertEqual(first, ("line", 13, 23, 113, 23))
        self.assertAlmostEqual(line.angle, 0.02)

        line.display(surface)
        second = surface.named("line")[1]
        self.assertEqual(line.jitter, 0)
        self.assertAlmostEqual(second[1], 10)
        self.assertAlmostEqual(second[3], 10 + math.cos(0.02) * 100)
        self.assertAlmostEqual(second[4], 20 + math.sin(0.02) * 100)
        self.assertAlmostEqual(line.angle, 0.04)


class StarTest(unittest.TestCase):
    def _star(self, x: float, y: float, angle: float, *, speed: float = 10, extra=(), chances=()) -> Star:
        entropy = _ScriptedEntropy([x, y, 4, speed, angle, 220, 150, *extra], chances)
        return Star(CanvasBounds(100, 100), entropy)

    def test_construction(self) -> None:
        star = self._star(95, 50, 0.0)
        self.assertEqual(star.color, (255, 220, 150))
        self.assertEqual(star.size, 4)
        self.assertEqual(len(star.trail), 0)

    def test_wrap_is_teleport_to_opposite_edge(self) -> None:
        star = self._star(95, 50, 0.0)
        star.update()
        self.assertEqual(star.pos.x, 0.0)
        self.assertAlmostEqual(star.pos.y, 50)

        star = self._star(5, 50, math.pi)
        star.update()
        self.assertEqual(star.pos.x, 100)

        star = self._star(50, 95, math.pi / 2)
        star.update()
        self.assertEqual(star.pos.y, 0.0)

        star = self._star(50, 5, -math.pi / 2)
        star.update()
        self.assertEqual(star.pos.y, 100)

    def test_trail_keeps_five_latest_positions_in_order(self) -> None:
        star = self._star(10, 10, 0.3, speed=3)
        visited: list[tuple[float, float]] = []
        for _ in range(8):
            visited.append((star.pos.x, star.pos.y))
            star.update()
            self.assertLessEqual(len(star.trail), 5)
        self.assertEqual([(p.x, p.y) for p in star.trail], visited[-5:])

    def test_trail_stores_copies(self) -> None:
        star = self._star(10, 10, 0.0, speed=3)
        star.update()
        self.assertIsNot(star.trail[0], star.pos)
        self.assertEqual(star.trail[0].x, 10)

    def test_random_heading_change(self) -> None:
        star = self._star(50, 50, 1.0, extra=[0.5], chances=[True])
        star.update()
        self.assertAlmostEqual(star.angle, 1.5)

        steady = self._star(50, 50, 1.0, chances=[False])
        steady.update()
        self.assertEqual(steady.angle, 1.0)

    def test_trail_alpha_ramp(self) -> None:
        star = self._star(10, 10, 0.0, speed=1)
        self.assertEqual(star.trail_alphas(), [])
        for _ in range(6):
            star.update()
        alphas = star.trail_alphas()
        self.assertEqual(len(alphas), 4)
        self.assertEqual(alphas[0], 50)
        self.assertEqual(alphas, sorted(alphas))
        self.assertLess(alphas[-1], 255)

    def test_display_draws_trail_body_and_points(self) -> None:
        star = self._star(50, 50, 0.0, speed=1)
        for _ in range(3):
            star.update()
        surface = _RecordingSurface()
        star.display(surface)

        self.assertEqual(len(surface.named("line")), 2 + 5)
        self.assertEqual(surface.named("circle"), [("circle", star.pos.x, star.pos.y, 4)])
        self.assertIn(("stroke", (255, 255, 0), 50), surface.calls)

        tip = star.point_segments()[0]
        self.assertAlmostEqual(tip[0], star.pos.x)
        self.assertAlmostEqual(tip[1], star.pos.y - 4)
        inner_angle = -math.pi / 2 + math.pi / 5
        self.assertAlmostEqual(tip[2], star.pos.x + math.cos(inner_angle) * 1.6)
        self.assertAlmostEqual(tip[3], star.pos.y + math.sin(inner_angle) * 1.6)


if __name__ == "__main__":
    unittest.main()
