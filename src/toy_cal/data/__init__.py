"""Data access layer."""

from __future__ import annotations

from .database import Database, UnitOfWork
from .schema import SCHEMA, TABLES

__all__ = ["Database", "SCHEMA", "TABLES", "UnitOfWork"]
