from dataclasses import replace

import pytest

from toy_cal.api import api_state
from toy_cal.config import MEMORY_DATABASE, DatabaseSettings, get_settings
from toy_cal.data import Database
from toy_cal.services import ContactService, EventService, ServiceContext


@pytest.fixture(scope="function")
def database():
    """Fresh in-memory database for each test."""
    db = Database(MEMORY_DATABASE)
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def contacts(database) -> ContactService:
    return ContactService(database)


@pytest.fixture
def events(database) -> EventService:
    return EventService(database)


@pytest.fixture
def tool_context():
    """Bind the tool layer to an in-memory database for the test's duration."""
    settings = replace(get_settings(), database=DatabaseSettings(path=MEMORY_DATABASE))
    context = ServiceContext(settings=settings)
    previous = api_state.context
    api_state.bind(context)
    try:
        yield context
    finally:
        api_state.bind(previous)
        context.close()


@pytest.fixture
def count_rows(database):
    """Return a counter for rows in ``table``, optionally filtered."""

    def _count(table: str, where: str = "", params: tuple = ()) -> int:
        sql = f"SELECT COUNT(*) FROM {table}"
        if where:
            sql += f" WHERE {where}"
        return database.execute(sql, params).fetchone()[0]

    return _count
