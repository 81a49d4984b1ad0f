from __future__ import annotations

import argparse
import sys
from pathlib import Path

from PIL import Image

SRC = Path(__file__).resolve().parents[1]
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from core.animator import Animator
from core.config_manager import AnimationConfig
from core.entropy_engine import EntropyEngine
from core.geometry import CanvasBounds
from core.mood import Mood
from ui.image_surface import ImageSurface


def render_frames(
    mood: Mood,
    *,
    frames: int = 60,
    width: int = 800,
    height: int = 600,
    seed: int | None = None,
    config: AnimationConfig | None = None,
) -> Image.Image:
    """Run the animator headlessly and return the last rendered frame."""
    animator = Animator(
        CanvasBounds(width, height),
        entropy=EntropyEngine(seed),
        config=config,
        mood=mood,
    )
    surface = ImageSurface(width, height)
    for _ in range(max(1, frames)):
        animator.draw_frame(surface)
    return surface.to_image()


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Render a mood visualization offscreen and save the final frame as PNG.",
    )
    parser.add_argument("--mood", choices=[mood.value for mood in Mood], default=Mood.HAPPY.value)
    parser.add_argument("--frames", type=int, default=60, help="Frames to simulate (default: 60)")
    parser.add_argument("--width", type=int, default=800)
    parser.add_argument("--height", type=int, default=600)
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible output")
    parser.add_argument(
        "-o",
        "--output",
        default="",
        help="Output PNG path (default: <mood>_frame.png)",
    )
    args = parser.parse_args()

    mood = Mood(args.mood)
    output_path = Path(args.output or f"{mood.value}_frame.png").expanduser().resolve()
    image = render_frames(mood, frames=args.frames, width=args.width, height=args.height, seed=args.seed)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    image.convert("RGB").save(output_path)
    print(f"Rendered {args.frames} {mood.value} frames -> {output_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
