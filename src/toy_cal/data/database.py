"""
Shared SQLite connection and transaction scoping.

``Database`` owns exactly one ``sqlite3`` connection, opened on first use
and kept for the lifetime of the process.  The connection runs in
autocommit mode so that single statements apply immediately; multi
statement units go through :meth:`Database.transaction`, which issues an
explicit ``BEGIN`` and only commits when the unit calls
:meth:`UnitOfWork.commit`.  Every other way out of the ``with`` block,
including an early ``return`` and any exception, rolls back.  A failed
``COMMIT`` is rolled back as well, so the connection never stays inside
an open transaction.
"""

from __future__ import annotations

import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator, Optional, Sequence

from ..config import MEMORY_DATABASE
from .schema import SCHEMA

logger = logging.getLogger(__name__)


class UnitOfWork:
    """Handle yielded by :meth:`Database.transaction`."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self._connection = connection
        self._commit_requested = False

    def execute(self, sql: str, params: Sequence[Any] = ()) -> sqlite3.Cursor:
        return self._connection.execute(sql, tuple(params))

    def commit(self) -> None:
        self._commit_requested = True

    @property
    def commit_requested(self) -> bool:
        return self._commit_requested


class Database:
    def __init__(self, path: str | Path = MEMORY_DATABASE) -> None:
        self._path = str(path)
        self._connection: Optional[sqlite3.Connection] = None

    @property
    def path(self) -> str:
        return self._path

    @property
    def is_open(self) -> bool:
        return self._connection is not None

    def connection(self) -> sqlite3.Connection:
        if self._connection is None:
            self._connection = self._open()
        return self._connection

    def _open(self) -> sqlite3.Connection:
        if self._path != MEMORY_DATABASE:
            Path(self._path).parent.mkdir(parents=True, exist_ok=True)
        # isolation_level=None: no implicit BEGIN, transactions are explicit.
        conn = sqlite3.connect(self._path, isolation_level=None, check_same_thread=False)
        conn.row_factory = sqlite3.Row
        conn.executescript(SCHEMA)
        logger.debug("Opened SQLite connection at %s", self._path)
        return conn

    def ensure_schema(self) -> None:
        self.connection().executescript(SCHEMA)

    def execute(self, sql: str, params: Sequence[Any] = ()) -> sqlite3.Cursor:
        return self.connection().execute(sql, tuple(params))

    def fetch_all(self, sql: str, params: Sequence[Any] = ()) -> list[sqlite3.Row]:
        return self.execute(sql, params).fetchall()

    @contextmanager
    def transaction(self) -> Iterator[UnitOfWork]:
        conn = self.connection()
        conn.execute("BEGIN")
        unit = UnitOfWork(conn)
        try:
            yield unit
        except BaseException:
            conn.execute("ROLLBACK")
            raise
        if not unit.commit_requested:
            conn.execute("ROLLBACK")
            return
        try:
            conn.execute("COMMIT")
        except BaseException:
            # A refused COMMIT (e.g. SQLITE_BUSY) leaves the transaction open.
            if conn.in_transaction:
                conn.execute("ROLLBACK")
            raise

    def close(self) -> None:
        if self._connection is not None:
            self._connection.close()
            self._connection = None
            logger.debug("Closed SQLite connection at %s", self._path)


__all__ = ["Database", "UnitOfWork"]
