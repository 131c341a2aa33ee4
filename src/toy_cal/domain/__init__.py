"""Domain models for contacts and calendar events."""

from __future__ import annotations

from .enums import SEARCHABLE_CONTACT_FIELDS, ContactField, SortOrder
from .models import Contact, Event, EventContactLink

__all__ = [
    "Contact",
    "ContactField",
    "Event",
    "EventContactLink",
    "SEARCHABLE_CONTACT_FIELDS",
    "SortOrder",
]
