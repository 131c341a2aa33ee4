"""Configuration models and helpers."""

from __future__ import annotations

from .settings import (
    DATA_DIR,
    MEMORY_DATABASE,
    AppSettings,
    DatabaseSettings,
    LoggingSettings,
    ServerSettings,
    get_settings,
)

__all__ = [
    "AppSettings",
    "DATA_DIR",
    "DatabaseSettings",
    "LoggingSettings",
    "MEMORY_DATABASE",
    "ServerSettings",
    "get_settings",
]
