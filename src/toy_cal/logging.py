from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from .config import LoggingSettings, get_settings

LOG_FILE_NAME = "toy_cal.log"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
MAX_LOG_BYTES = 1_000_000
LOG_BACKUPS = 5

_configured = False


def _level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def _handlers(log_file: Path) -> list[logging.Handler]:
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    handlers: list[logging.Handler] = [
        RotatingFileHandler(log_file, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUPS, encoding="utf-8"),
        logging.StreamHandler(),
    ]
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def configure_logging(settings: Optional[LoggingSettings] = None) -> Path:
    """Send toy_cal records to a rotating file under ``settings.log_dir`` and the console.

    Only the first call in a process attaches handlers; later calls return
    the log file path without touching the root logger.
    """

    global _configured
    settings = settings or get_settings().logging
    log_file = settings.log_dir / LOG_FILE_NAME
    if _configured:
        return log_file

    log_file.parent.mkdir(parents=True, exist_ok=True)
    root = logging.getLogger()
    root.setLevel(_level(settings.level))
    for handler in _handlers(log_file):
        root.addHandler(handler)

    _configured = True
    logging.getLogger(__name__).debug("Logging to %s at level %s", log_file, settings.level)
    return log_file


__all__ = ["configure_logging"]
