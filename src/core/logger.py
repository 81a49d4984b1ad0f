from __future__ import annotations

import logging
import threading
from logging.handlers import RotatingFileHandler
from pathlib import Path

from PySide6.QtCore import QtMsgType, qInstallMessageHandler

LOGGER_NAME = "Moodscape"
LOG_FILE_NAME = "app.log"
LOG_MAX_BYTES = 5 * 1024 * 1024
LOG_BACKUP_COUNT = 3

_QT_LEVELS = {
    QtMsgType.QtDebugMsg: logging.DEBUG,
    QtMsgType.QtInfoMsg: logging.INFO,
    QtMsgType.QtWarningMsg: logging.WARNING,
    QtMsgType.QtCriticalMsg: logging.ERROR,
    QtMsgType.QtFatalMsg: logging.CRITICAL,
}

_bridge_lock = threading.Lock()
_bridge_installed = False
_bridge_logger: logging.Logger | None = None


def _qt_message_handler(mode, context, message: str) -> None:
    logger = _bridge_logger
    if logger is None:
        return
    category = str(getattr(context, "category", "") or "").strip()
    prefix = f"[Qt:{category}] " if category else "[Qt] "
    logger.log(_QT_LEVELS.get(mode, logging.INFO), "%s%s", prefix, message)


def _set_bridge_target(logger: logging.Logger | None) -> None:
    global _bridge_installed, _bridge_logger
    with _bridge_lock:
        _bridge_logger = logger
        if logger is None or _bridge_installed:
            return
        qInstallMessageHandler(_qt_message_handler)
        _bridge_installed = True


def _console_handlers(logger: logging.Logger) -> list[logging.Handler]:
    return [
        handler
        for handler in logger.handlers
        if type(handler) is logging.StreamHandler
    ]


def _sync_console(logger: logging.Logger, debug: bool) -> None:
    console = _console_handlers(logger)
    if debug and not console:
        handler = logging.StreamHandler()
        handler.setLevel(logging.DEBUG)
        handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        logger.addHandler(handler)
    elif not debug:
        for handler in console:
            logger.removeHandler(handler)


def setup_logger(
    log_dir: Path,
    debug: bool = False,
    *,
    max_bytes: int = LOG_MAX_BYTES,
    backup_count: int = LOG_BACKUP_COUNT,
) -> logging.Logger:
    """
    Configure the rotating mood log under `log_dir`.

    Calling it again keeps the file handler and only switches the level and
    the debug console. Qt's own warnings (painter misuse, platform plugin
    notes) land in the same file.
    """
    log_dir.mkdir(parents=True, exist_ok=True)
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    logger.propagate = False

    if not any(isinstance(handler, RotatingFileHandler) for handler in logger.handlers):
        file_handler = RotatingFileHandler(
            log_dir / LOG_FILE_NAME,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter(
                "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(file_handler)

    _sync_console(logger, debug)
    _set_bridge_target(logger)
    return logger


def shutdown_logger() -> None:
    """Flush and detach every handler; Qt messages are dropped afterwards."""
    logger = logging.getLogger(LOGGER_NAME)
    _set_bridge_target(None)
    for handler in list(logger.handlers):
        handler.flush()
        handler.close()
        logger.removeHandler(handler)
