from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Protocol

from PySide6.QtCore import QIODevice, QSaveFile

logger = logging.getLogger("Moodscape")


class KeyValueStore(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> bool: ...


class MemoryStore:
    """In-process store, mostly for tests and headless rendering."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._values: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> bool:
        self._values[key] = str(value)
        return True

    def keys(self) -> list[str]:
        return list(self._values)


class JsonFileStore:
    """
    String key/value pairs kept in one JSON object file.

    Every set() rewrites the whole file atomically through QSaveFile.
    """

    def __init__(self, path: Path):
        self._path = Path(path)
        self._values = self._read()

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> bool:
        candidate = dict(self._values)
        candidate[key] = str(value)
        if not self._write(candidate):
            return False
        self._values = candidate
        return True

    def reload(self) -> None:
        self._values = self._read()

    def _read(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            # ValueError covers both undecodable bytes and bad JSON
            logger.warning("Mood store unreadable, starting empty: %s (%s)", self._path, exc)
            return {}
        if not isinstance(raw, dict):
            logger.warning("Mood store is not a JSON object, starting empty: %s", self._path)
            return {}
        return {str(key): value for key, value in raw.items() if isinstance(value, str)}

    def _write(self, values: dict[str, str]) -> bool:
        content = json.dumps(values, ensure_ascii=False, indent=2) + "\n"
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            saver = QSaveFile(str(self._path))
            if not saver.open(QIODevice.OpenModeFlag.WriteOnly | QIODevice.OpenModeFlag.Truncate):
                logger.warning("Cannot open mood store for writing: %s", self._path)
                return False
            raw = content.encode("utf-8")
            written = saver.write(raw)
            if written != len(raw):
                saver.cancelWriting()
                logger.warning("Short write to mood store: %s", self._path)
                return False
            if not saver.commit():
                logger.warning("Failed to commit mood store: %s", self._path)
                return False
        except OSError as exc:
            logger.warning("Failed to write mood store %s: %s", self._path, exc)
            return False
        return True
