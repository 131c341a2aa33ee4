"""Tests for EventService."""

import json
import sqlite3
from datetime import datetime, timezone

import pytest

from toy_cal.api import render_result
from toy_cal.data import Database
from toy_cal.services import ContactService, EventService, ResultKind
from toy_cal.services.events import CREATE_FAILED, DELETE_FAILED, NO_EVENTS, NO_EVENTS_IN_RANGE

BASE = int(datetime(2025, 9, 18, 12, 0, tzinfo=timezone.utc).timestamp())


def headings(result) -> list[str]:
    return [record["heading"] for record in json.loads(render_result(result))]


@pytest.fixture
def reject_contact_999(database):
    """Make link insertion fail for contact id 999."""
    database.execute(
        "CREATE TRIGGER reject_contact_999 BEFORE INSERT ON event_contacts "
        "WHEN NEW.contact_id = 999 BEGIN SELECT RAISE(ABORT, 'rejected'); END"
    )


def test_create_event_with_contacts(contacts, events, database):
    first = contacts.create("Test Contact 1").value
    second = contacts.create("Test Contact 2").value

    result = events.create("Team Meeting", BASE, BASE + 3600, "Discuss project status", [first, second])

    assert result.kind is ResultKind.OK
    assert render_result(result) == f"Successfully created event with ID {result.value}."
    row = database.execute("SELECT * FROM events WHERE id = ?", (result.value,)).fetchone()
    assert row["heading"] == "Team Meeting"
    assert row["description"] == "Discuss project status"
    assert events.contact_ids(result.value) == [first, second]


def test_create_links_unknown_contact_ids(events):
    result = events.create("Lunch", BASE, BASE + 60, contact_ids=[42, 7, 42])
    assert events.contact_ids(result.value) == [42, 7, 42]


def test_create_without_contacts_adds_no_links(events, count_rows):
    events.create("Solo", BASE, BASE + 60, contact_ids=[])
    events.create("Solo again", BASE, BASE + 60)
    assert count_rows("events") == 2
    assert count_rows("event_contacts") == 0


def test_create_rejects_end_before_start(events, count_rows):
    result = events.create("Time Travel Meeting", BASE, BASE - 3600)

    assert result.kind is ResultKind.INVALID
    assert render_result(result) == "Error: End time cannot be before start time."
    assert count_rows("events") == 0


def test_create_allows_zero_duration(events):
    result = events.create("Reminder", BASE, BASE)
    assert result.kind is ResultKind.OK


def test_create_rejects_blank_heading(events, count_rows):
    assert render_result(events.create("  ", BASE, BASE + 1)) == "Error: Event heading cannot be empty."
    assert count_rows("events") == 0


def test_create_rolls_back_when_link_insert_fails(events, count_rows, reject_contact_999):
    result = events.create("Doomed", BASE, BASE + 60, contact_ids=[1, 2, 999, 3])

    assert result.kind is ResultKind.DATABASE_ERROR
    assert render_result(result) == CREATE_FAILED
    assert count_rows("events") == 0
    assert count_rows("event_contacts") == 0


def test_list_events_ordered_by_start(events):
    assert render_result(events.list()) == NO_EVENTS

    events.create("Event Later", BASE + 3600, BASE + 7200)
    events.create("Event Earlier", BASE, BASE + 3600)

    records = json.loads(render_result(events.list()))
    assert [record["heading"] for record in records] == ["Event Earlier", "Event Later"]
    assert set(records[0]) == {"id", "heading", "description", "start_time", "end_time"}


def test_find_events_overlapping_window(events):
    events.create("Event 1", BASE - 7200, BASE - 3600)
    events.create("Event 4", BASE + 9000, BASE + 12600)
    events.create("Event 2", BASE - 1800, BASE + 1800)
    events.create("Event 5", BASE + 14400, BASE + 18000)
    events.create("Event 3", BASE + 3600, BASE + 7200)

    assert headings(events.find(BASE, BASE + 10800)) == ["Event 2", "Event 3", "Event 4"]
    assert render_result(events.find(BASE - 10000, BASE - 9000)) == NO_EVENTS_IN_RANGE


def test_find_excludes_touching_boundaries(events):
    events.create("Ends at window start", BASE - 3600, BASE)
    events.create("Starts at window end", BASE + 10800, BASE + 14400)
    events.create("Covers window", BASE - 1, BASE + 10801)

    assert headings(events.find(BASE, BASE + 10800)) == ["Covers window"]


def test_update_event(events, database):
    event_id = events.create("Original Event", BASE, BASE + 3600).value

    result = events.update(event_id, heading="Updated Event", start_time=BASE + 100)

    assert render_result(result) == f"Successfully updated event ID {event_id}."
    row = database.execute("SELECT * FROM events WHERE id = ?", (event_id,)).fetchone()
    assert row["heading"] == "Updated Event"
    assert row["start_time"] == BASE + 100
    assert row["end_time"] == BASE + 3600


def test_update_does_not_recheck_time_order(events, database):
    event_id = events.create("Meeting", BASE, BASE + 3600).value

    result = events.update(event_id, start_time=BASE + 7200)

    assert result.kind is ResultKind.OK
    row = database.execute("SELECT start_time, end_time FROM events WHERE id = ?", (event_id,)).fetchone()
    assert row["start_time"] > row["end_time"]


def test_update_without_fields(events, database):
    event_id = events.create("Meeting", BASE, BASE + 60).value
    before = database.execute("SELECT updated_at FROM events WHERE id = ?", (event_id,)).fetchone()[0]

    assert render_result(events.update(event_id)) == "Error: No fields provided to update."
    after = database.execute("SELECT updated_at FROM events WHERE id = ?", (event_id,)).fetchone()[0]
    assert after == before


def test_update_missing_event(events):
    result = events.update(999, heading="Ghost Event")
    assert render_result(result) == "Error: Event with ID 999 not found or no changes made."


def test_delete_event_removes_links(contacts, events, count_rows):
    contact_id = contacts.create("Contact To Link").value
    event_id = events.create("Event To Delete", BASE, BASE + 3600, None, [contact_id]).value

    result = events.delete(event_id)

    assert render_result(result) == f"Successfully deleted event ID {event_id}."
    assert count_rows("events", "id = ?", (event_id,)) == 0
    assert count_rows("event_contacts", "event_id = ?", (event_id,)) == 0
    assert count_rows("contacts") == 1


def test_delete_missing_event(events, count_rows):
    events.create("Keep me", BASE, BASE + 60)

    result = events.delete(999)

    assert result.kind is ResultKind.NOT_FOUND
    assert render_result(result) == "Error: Event with ID 999 not found."
    assert count_rows("events") == 1


def test_delete_missing_event_rolls_back_orphan_links(events, database, count_rows):
    database.execute("INSERT INTO event_contacts (event_id, contact_id) VALUES (?, ?)", (404, 1))

    assert events.delete(404).kind is ResultKind.NOT_FOUND
    assert count_rows("event_contacts", "event_id = ?", (404,)) == 1


def test_delete_rolls_back_on_database_error(events, database, count_rows):
    event_id = events.create("Locked", BASE, BASE + 60, contact_ids=[1, 2]).value
    database.execute(
        "CREATE TRIGGER keep_events BEFORE DELETE ON events "
        "BEGIN SELECT RAISE(ABORT, 'locked'); END"
    )

    result = events.delete(event_id)

    assert result.kind is ResultKind.DATABASE_ERROR
    assert render_result(result) == DELETE_FAILED
    assert count_rows("events", "id = ?", (event_id,)) == 1
    assert count_rows("event_contacts", "event_id = ?", (event_id,)) == 2
    assert not database.connection().in_transaction


def test_create_recovers_after_refused_commit(tmp_path):
    path = tmp_path / "calendar.sqlite3"
    database = Database(path)
    database.execute("PRAGMA busy_timeout = 50")
    events = EventService(database)
    contacts = ContactService(database)
    reader = sqlite3.connect(path, isolation_level=None)
    try:
        reader.execute("BEGIN")
        reader.execute("SELECT COUNT(*) FROM events").fetchall()
        assert events.create("Blocked", BASE, BASE + 60, contact_ids=[1]).kind is ResultKind.DATABASE_ERROR
        assert not database.connection().in_transaction
        reader.execute("ROLLBACK")

        assert events.create("Unblocked", BASE, BASE + 60, contact_ids=[1]).kind is ResultKind.OK
        assert contacts.create("Persisted").kind is ResultKind.OK
    finally:
        reader.close()
        database.close()

    reopened = Database(path)
    try:
        assert [row["heading"] for row in reopened.fetch_all("SELECT heading FROM events")] == ["Unblocked"]
        assert [row["name"] for row in reopened.fetch_all("SELECT name FROM contacts")] == ["Persisted"]
        assert reopened.fetch_all("SELECT COUNT(*) AS n FROM event_contacts")[0]["n"] == 1
    finally:
        reopened.close()
