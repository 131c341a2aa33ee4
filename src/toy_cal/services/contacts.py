from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Optional

from ..data import Database
from ..domain import Contact, ContactField, SortOrder
from .results import OperationResult
from .validation import ValidationError, build_assignments, require_text

logger = logging.getLogger(__name__)

CONTACT_COLUMNS = "id, name, email, phone, notes"
EMPTY_NAME = "Error: Contact name cannot be empty."
NO_CONTACTS = "No contacts found."
NO_MATCHES = "No contacts found matching that term."
INVALID_SEARCH_FIELD = "Error: Invalid search field specified. Allowed fields are: id, name, email, phone."


@dataclass(slots=True)
class ContactService:
    database: Database

    def create(
        self,
        name: str,
        email: Optional[str] = None,
        phone: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> OperationResult:
        try:
            clean_name = require_text(name, EMPTY_NAME)
        except ValidationError as exc:
            return OperationResult.invalid(str(exc))

        timestamp = int(time.time())
        cursor = self.database.execute(
            "INSERT INTO contacts (name, email, phone, notes, created_at, updated_at) "
            "VALUES (?, ?, ?, ?, ?, ?)",
            (clean_name, email, phone, notes, timestamp, timestamp),
        )
        contact_id = int(cursor.lastrowid)
        logger.info("Created contact %s", contact_id)
        return OperationResult.ok(
            f"Successfully created contact '{name}' with ID {contact_id}.",
            value=contact_id,
        )

    def list(self, order_by: str = "name", order: str = "ASC") -> OperationResult:
        field = ContactField.parse(order_by) or ContactField.NAME
        direction = SortOrder.normalize(order)
        rows = self.database.fetch_all(
            f"SELECT {CONTACT_COLUMNS} FROM contacts ORDER BY {field.column} {direction.value}"
        )
        contacts = [Contact.from_record(row) for row in rows]
        return OperationResult.rows(contacts, empty_message=NO_CONTACTS)

    def find(self, field: str, value: str) -> OperationResult:
        search_field = ContactField.parse(field)
        if search_field is None or not search_field.searchable:
            return OperationResult.invalid(INVALID_SEARCH_FIELD)

        if search_field is ContactField.NAME:
            # Every whitespace-separated term must appear somewhere in the name.
            terms = [term for term in str(value).split() if term]
            if not terms:
                return OperationResult.not_found(NO_MATCHES)
            where = " AND ".join("name LIKE ?" for _ in terms)
            params = [f"%{term}%" for term in terms]
        else:
            where = f"{search_field.column} = ?"
            params = [value]

        logger.debug("Searching contacts by %s", search_field.value)
        rows = self.database.fetch_all(f"SELECT {CONTACT_COLUMNS} FROM contacts WHERE {where}", params)
        if not rows:
            return OperationResult.not_found(NO_MATCHES)
        return OperationResult.rows([Contact.from_record(row) for row in rows], empty_message=NO_MATCHES)

    def update(
        self,
        contact_id: int,
        name: Optional[str] = None,
        email: Optional[str] = None,
        phone: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> OperationResult:
        try:
            if name is not None:
                name = require_text(name, EMPTY_NAME)
            assignments, params = build_assignments(
                (("name", name), ("email", email), ("phone", phone), ("notes", notes)),
                timestamp=int(time.time()),
            )
        except ValidationError as exc:
            return OperationResult.invalid(str(exc))

        cursor = self.database.execute(
            f"UPDATE contacts SET {assignments} WHERE id = ?",
            [*params, contact_id],
        )
        if cursor.rowcount > 0:
            return OperationResult.ok(f"Successfully updated contact ID {contact_id}.")
        return OperationResult.not_found(f"Error: Contact with ID {contact_id} not found or no changes made.")

    def delete(self, contact_id: int) -> OperationResult:
        # Links in event_contacts are left in place.
        cursor = self.database.execute("DELETE FROM contacts WHERE id = ?", (contact_id,))
        if cursor.rowcount > 0:
            logger.info("Deleted contact %s", contact_id)
            return OperationResult.ok(f"Successfully deleted contact ID {contact_id}.")
        return OperationResult.not_found(f"Error: Contact with ID {contact_id} not found.")

    def get(self, contact_id: int) -> Optional[Contact]:
        rows = self.database.fetch_all("SELECT * FROM contacts WHERE id = ?", (contact_id,))
        return Contact.from_record(rows[0]) if rows else None
