from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from platformdirs import user_data_dir

load_dotenv()

APP_NAME = "Toy Cal"
APP_AUTHOR = "ToyCal"
DATA_DIR = Path(user_data_dir(APP_NAME, APP_AUTHOR))
MEMORY_DATABASE = ":memory:"


@dataclass(frozen=True)
class DatabaseSettings:
    path: str


@dataclass(frozen=True)
class ServerSettings:
    name: str
    version: str
    mcp_host: str
    mcp_port: int
    api_host: str
    api_port: int


@dataclass(frozen=True)
class LoggingSettings:
    level: str
    log_dir: Path


@dataclass(frozen=True)
class AppSettings:
    database: DatabaseSettings
    server: ServerSettings
    logging: LoggingSettings


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    database = DatabaseSettings(
        path=os.getenv("TOY_CAL_DATABASE_PATH", str(DATA_DIR / "toy_cal.sqlite3")),
    )

    server = ServerSettings(
        name=os.getenv("TOY_CAL_SERVER_NAME", "Toy Cal Server"),
        version=os.getenv("TOY_CAL_SERVER_VERSION", "1.0.0"),
        mcp_host=os.getenv("TOY_CAL_MCP_HOST", "127.0.0.1"),
        mcp_port=_int_from_env("TOY_CAL_MCP_PORT", 8765),
        api_host=os.getenv("TOY_CAL_API_HOST", "127.0.0.1"),
        api_port=_int_from_env("TOY_CAL_API_PORT", 8000),
    )

    logging = LoggingSettings(
        level=os.getenv("TOY_CAL_LOG_LEVEL", "INFO").upper(),
        log_dir=Path(os.getenv("TOY_CAL_LOG_DIR", str(DATA_DIR))),
    )

    return AppSettings(database=database, server=server, logging=logging)
