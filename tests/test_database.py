"""Tests for the shared connection and transaction scoping."""

import sqlite3

import pytest

from toy_cal.data import TABLES, Database


def test_schema_created_on_first_use(database):
    names = {
        row["name"]
        for row in database.fetch_all("SELECT name FROM sqlite_master WHERE type = 'table'")
    }
    assert set(TABLES) <= names


def test_connection_is_lazy_and_shared():
    database = Database()
    assert not database.is_open
    try:
        assert database.connection() is database.connection()
        assert database.is_open
    finally:
        database.close()


def test_transaction_commits_only_when_requested(database, count_rows):
    with database.transaction() as unit:
        unit.execute("INSERT INTO event_contacts (event_id, contact_id) VALUES (1, 1)")
    assert count_rows("event_contacts") == 0

    with database.transaction() as unit:
        unit.execute("INSERT INTO event_contacts (event_id, contact_id) VALUES (1, 1)")
        unit.commit()
    assert count_rows("event_contacts") == 1


def test_transaction_rolls_back_and_reraises(database, count_rows):
    with pytest.raises(sqlite3.OperationalError):
        with database.transaction() as unit:
            unit.execute("INSERT INTO event_contacts (event_id, contact_id) VALUES (2, 2)")
            unit.execute("INSERT INTO no_such_table VALUES (1)")
            unit.commit()
    assert count_rows("event_contacts") == 0
    assert not database.connection().in_transaction


def test_file_database_persists_across_handles(tmp_path):
    path = tmp_path / "nested" / "store.sqlite3"
    first = Database(path)
    first.execute(
        "INSERT INTO contacts (name, created_at, updated_at) VALUES (?, ?, ?)",
        ("Alice", 1, 1),
    )
    first.close()

    second = Database(path)
    try:
        rows = second.fetch_all("SELECT name FROM contacts")
        assert [row["name"] for row in rows] == ["Alice"]
    finally:
        second.close()


def test_close_is_idempotent_and_reopens(database):
    database.connection()
    database.close()
    database.close()
    assert database.fetch_all("SELECT COUNT(*) AS n FROM contacts")[0]["n"] == 0


def test_failed_commit_rolls_back_and_frees_connection(tmp_path):
    path = tmp_path / "busy.sqlite3"
    database = Database(path)
    database.execute("PRAGMA busy_timeout = 50")
    reader = sqlite3.connect(path, isolation_level=None)
    try:
        # An open read transaction keeps a SHARED lock, so COMMIT cannot get EXCLUSIVE.
        reader.execute("BEGIN")
        reader.execute("SELECT COUNT(*) FROM contacts").fetchall()

        with pytest.raises(sqlite3.OperationalError):
            with database.transaction() as unit:
                unit.execute("INSERT INTO event_contacts (event_id, contact_id) VALUES (1, 1)")
                unit.commit()
        assert not database.connection().in_transaction

        reader.execute("ROLLBACK")
        with database.transaction() as unit:
            unit.execute("INSERT INTO event_contacts (event_id, contact_id) VALUES (2, 2)")
            unit.commit()
    finally:
        reader.close()
        database.close()

    reopened = Database(path)
    try:
        rows = reopened.fetch_all("SELECT event_id FROM event_contacts")
        assert [row["event_id"] for row in rows] == [2]
    finally:
        reopened.close()
