from __future__ import annotations

import logging
import sqlite3
import time
from dataclasses import dataclass
from typing import Iterable, Optional

from ..data import Database
from ..domain import Event, EventContactLink
from .results import OperationResult
from .validation import ValidationError, build_assignments, require_text, require_time_order

logger = logging.getLogger(__name__)

EVENT_COLUMNS = "id, heading, description, start_time, end_time"
EMPTY_HEADING = "Error: Event heading cannot be empty."
NO_EVENTS = "No events found."
NO_EVENTS_IN_RANGE = "No events found in that time range."
CREATE_FAILED = "Error: Could not create event due to a database error."
DELETE_FAILED = "Error: Could not delete event due to a database error."


@dataclass(slots=True)
class EventService:
    database: Database

    def create(
        self,
        heading: str,
        start_time: int,
        end_time: int,
        description: Optional[str] = None,
        contact_ids: Optional[Iterable[int]] = None,
    ) -> OperationResult:
        try:
            require_text(heading, EMPTY_HEADING)
            require_time_order(start_time, end_time)
        except ValidationError as exc:
            return OperationResult.invalid(str(exc))

        timestamp = int(time.time())
        try:
            with self.database.transaction() as unit:
                cursor = unit.execute(
                    "INSERT INTO events (heading, description, start_time, end_time, created_at, updated_at) "
                    "VALUES (?, ?, ?, ?, ?, ?)",
                    (heading, description, start_time, end_time, timestamp, timestamp),
                )
                event_id = int(cursor.lastrowid)
                for contact_id in contact_ids or ():
                    unit.execute(
                        "INSERT INTO event_contacts (event_id, contact_id) VALUES (?, ?)",
                        (event_id, contact_id),
                    )
                unit.commit()
        except sqlite3.Error:
            logger.exception("Creating event %r failed; transaction rolled back", heading)
            return OperationResult.database_error(CREATE_FAILED)

        logger.info("Created event %s", event_id)
        return OperationResult.ok(f"Successfully created event with ID {event_id}.", value=event_id)

    def list(self) -> OperationResult:
        rows = self.database.fetch_all(f"SELECT {EVENT_COLUMNS} FROM events ORDER BY start_time ASC")
        return OperationResult.rows([Event.from_record(row) for row in rows], empty_message=NO_EVENTS)

    def find(self, start_time: int, end_time: int) -> OperationResult:
        # Overlap: the event starts before the window ends and ends after it starts.
        rows = self.database.fetch_all(
            f"SELECT {EVENT_COLUMNS} FROM events "
            "WHERE start_time < ? AND end_time > ? ORDER BY start_time ASC",
            (end_time, start_time),
        )
        return OperationResult.rows([Event.from_record(row) for row in rows], empty_message=NO_EVENTS_IN_RANGE)

    def update(
        self,
        event_id: int,
        heading: Optional[str] = None,
        start_time: Optional[int] = None,
        end_time: Optional[int] = None,
        description: Optional[str] = None,
    ) -> OperationResult:
        try:
            if heading is not None:
                require_text(heading, EMPTY_HEADING)
            assignments, params = build_assignments(
                (
                    ("heading", heading),
                    ("start_time", start_time),
                    ("end_time", end_time),
                    ("description", description),
                ),
                timestamp=int(time.time()),
            )
        except ValidationError as exc:
            return OperationResult.invalid(str(exc))

        cursor = self.database.execute(
            f"UPDATE events SET {assignments} WHERE id = ?",
            [*params, event_id],
        )
        if cursor.rowcount > 0:
            return OperationResult.ok(f"Successfully updated event ID {event_id}.")
        return OperationResult.not_found(f"Error: Event with ID {event_id} not found or no changes made.")

    def delete(self, event_id: int) -> OperationResult:
        try:
            with self.database.transaction() as unit:
                unit.execute("DELETE FROM event_contacts WHERE event_id = ?", (event_id,))
                cursor = unit.execute("DELETE FROM events WHERE id = ?", (event_id,))
                if cursor.rowcount == 0:
                    # Leaving without commit() rolls the link deletion back too.
                    return OperationResult.not_found(f"Error: Event with ID {event_id} not found.")
                unit.commit()
        except sqlite3.Error:
            logger.exception("Deleting event %s failed; transaction rolled back", event_id)
            return OperationResult.database_error(DELETE_FAILED)

        logger.info("Deleted event %s", event_id)
        return OperationResult.ok(f"Successfully deleted event ID {event_id}.")

    def links(self, event_id: int) -> list[EventContactLink]:
        rows = self.database.fetch_all(
            "SELECT event_id, contact_id FROM event_contacts WHERE event_id = ? ORDER BY rowid",
            (event_id,),
        )
        return [EventContactLink(event_id=int(row["event_id"]), contact_id=int(row["contact_id"])) for row in rows]

    def contact_ids(self, event_id: int) -> list[int]:
        return [link.contact_id for link in self.links(event_id)]
