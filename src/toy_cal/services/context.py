from __future__ import annotations

from dataclasses import dataclass, field

from ..config import AppSettings, get_settings
from ..data import Database


@dataclass(slots=True)
class ServiceContext:
    """Owns the settings and the single shared database handle."""

    settings: AppSettings = field(default_factory=get_settings)
    database: Database = field(init=False)

    def __post_init__(self) -> None:
        self.database = Database(self.settings.database.path)

    def close(self) -> None:
        self.database.close()
