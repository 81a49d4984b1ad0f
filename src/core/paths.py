from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from PySide6.QtCore import QStandardPaths

APP_NAME = "Moodscape"

logger = logging.getLogger("Moodscape")


def get_base_dir() -> Path:
    """
    Return the read-only project/bundle directory.

    APP_BASE_DIR wins when set; otherwise the repository root.
    """
    env_base = os.environ.get("APP_BASE_DIR", "").strip()
    if env_base:
        return Path(env_base)
    return Path(__file__).resolve().parents[2]


def get_user_data_dir() -> Path:
    """Return the writable per-user directory holding config, store and logs."""
    location = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.AppDataLocation)
    if location:
        target = Path(location)
    elif sys.platform == "win32":
        target = Path(os.environ.get("LOCALAPPDATA", Path.home() / "AppData" / "Local")) / APP_NAME
    else:
        target = Path.home() / ".local" / "share" / APP_NAME

    # without application metadata Qt returns an app-agnostic directory
    if target.name.lower() != APP_NAME.lower():
        target = target / APP_NAME

    target.mkdir(parents=True, exist_ok=True)
    return target


def get_log_dir() -> Path:
    target = get_user_data_dir() / "logs"
    target.mkdir(parents=True, exist_ok=True)
    return target


def get_store_path(file_name: str = "mood_store.json") -> Path:
    return get_user_data_dir() / file_name


def resolve_config_path() -> Path:
    """
    Resolve the writable config path.

    On first run the bundled `config/config.json` is copied into the user data
    directory; the user copy is returned even when nothing could be copied.
    """
    user_cfg = get_user_data_dir() / "config.json"
    if user_cfg.exists():
        return user_cfg

    bundled = get_base_dir() / "config" / "config.json"
    if bundled.exists():
        try:
            user_cfg.write_text(bundled.read_text(encoding="utf-8"), encoding="utf-8")
        except OSError as exc:
            logger.warning("Could not copy bundled config to %s: %s", user_cfg, exc)

    return user_cfg
