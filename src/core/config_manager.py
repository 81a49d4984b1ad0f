from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from PySide6.QtCore import QIODevice, QSaveFile

logger = logging.getLogger("Moodscape")


@dataclass(slots=True)
class CanvasConfig:
    reserved_strip_height: int = 100
    background_gray: int = 240
    default_width: int = 1280
    default_height: int = 800


@dataclass(slots=True)
class AnimationConfig:
    frame_interval_ms: int = 16
    particle_count: int = 50
    wave_count: int = 5
    line_count: int = 20
    star_count: int = 100
    max_stars: int = 150
    star_spawn_interval_frames: int = 30


@dataclass(slots=True)
class StorageConfig:
    store_file: str = "mood_store.json"


@dataclass(slots=True)
class BehaviorConfig:
    debug_mode: bool = False


@dataclass(slots=True)
class AppConfig:
    version: str = "1.0.0"
    canvas: CanvasConfig = field(default_factory=CanvasConfig)
    animation: AnimationConfig = field(default_factory=AnimationConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)
    behavior: BehaviorConfig = field(default_factory=BehaviorConfig)


def _int_field(payload: dict, key: str, default: int, *, low: int, high: int | None = None) -> int:
    try:
        value = int(payload.get(key, default))
    except (TypeError, ValueError):
        value = default
    value = max(low, value)
    if high is not None:
        value = min(high, value)
    return value


class ConfigManager:
    """Load app runtime configuration from JSON with safe defaults."""

    def __init__(self, config_path: Path):
        self._config_path = config_path

    def load(self) -> AppConfig:
        if not self._config_path.exists():
            return AppConfig()
        try:
            raw = json.loads(self._config_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("Config unreadable, using defaults: %s (%s)", self._config_path, exc)
            return AppConfig()
        if not isinstance(raw, dict):
            return AppConfig()

        return AppConfig(
            version=str(raw.get("version", "1.0.0")),
            canvas=self._build_canvas(raw.get("canvas")),
            animation=self._build_animation(raw.get("animation")),
            storage=self._build_storage(raw.get("storage")),
            behavior=self._build_behavior(raw.get("behavior")),
        )

    def save(self, config: AppConfig) -> bool:
        payload = self.to_dict(config)
        self._config_path.parent.mkdir(parents=True, exist_ok=True)
        content = json.dumps(payload, ensure_ascii=False, indent=2) + "\n"
        try:
            saver = QSaveFile(str(self._config_path))
            if not saver.open(QIODevice.OpenModeFlag.WriteOnly | QIODevice.OpenModeFlag.Truncate):
                return False
            raw = content.encode("utf-8")
            written = saver.write(raw)
            if written != len(raw):
                saver.cancelWriting()
                return False
            if not saver.commit():
                return False
        except Exception as exc:
            logger.warning("Failed to save config %s: %s", self._config_path, exc)
            return False
        return True

    @staticmethod
    def to_dict(config: AppConfig) -> dict[str, Any]:
        return {
            "version": str(config.version),
            "canvas": {
                "reserved_strip_height": int(config.canvas.reserved_strip_height),
                "background_gray": int(config.canvas.background_gray),
                "default_width": int(config.canvas.default_width),
                "default_height": int(config.canvas.default_height),
            },
            "animation": {
                "frame_interval_ms": int(config.animation.frame_interval_ms),
                "particle_count": int(config.animation.particle_count),
                "wave_count": int(config.animation.wave_count),
                "line_count": int(config.animation.line_count),
                "star_count": int(config.animation.star_count),
                "max_stars": int(config.animation.max_stars),
                "star_spawn_interval_frames": int(config.animation.star_spawn_interval_frames),
            },
            "storage": {
                "store_file": str(config.storage.store_file),
            },
            "behavior": {
                "debug_mode": bool(config.behavior.debug_mode),
            },
        }

    @staticmethod
    def _build_canvas(payload: Any) -> CanvasConfig:
        if not isinstance(payload, dict):
            return CanvasConfig()
        return CanvasConfig(
            reserved_strip_height=_int_field(payload, "reserved_strip_height", 100, low=0),
            background_gray=_int_field(payload, "background_gray", 240, low=0, high=255),
            default_width=_int_field(payload, "default_width", 1280, low=100),
            default_height=_int_field(payload, "default_height", 800, low=100),
        )

    @staticmethod
    def _build_animation(payload: Any) -> AnimationConfig:
        if not isinstance(payload, dict):
            return AnimationConfig()
        star_count = _int_field(payload, "star_count", 100, low=0)
        return AnimationConfig(
            frame_interval_ms=_int_field(payload, "frame_interval_ms", 16, low=1, high=1000),
            particle_count=_int_field(payload, "particle_count", 50, low=0),
            wave_count=_int_field(payload, "wave_count", 5, low=0),
            line_count=_int_field(payload, "line_count", 20, low=0),
            star_count=star_count,
            max_stars=_int_field(payload, "max_stars", 150, low=max(1, star_count)),
            star_spawn_interval_frames=_int_field(payload, "star_spawn_interval_frames", 30, low=1),
        )

    @staticmethod
    def _build_storage(payload: Any) -> StorageConfig:
        if not isinstance(payload, dict):
            return StorageConfig()
        store_file = str(payload.get("store_file", "mood_store.json")).strip()
        return StorageConfig(store_file=store_file or "mood_store.json")

    @staticmethod
    def _build_behavior(payload: Any) -> BehaviorConfig:
        if not isinstance(payload, dict):
            return BehaviorConfig()
        return BehaviorConfig(debug_mode=bool(payload.get("debug_mode", False)))
