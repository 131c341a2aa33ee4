from __future__ import annotations

from typing import Any, Dict

import orjson

from ..domain import Contact, Event
from ..services import OperationResult, ResultKind
from .models import ContactPayload, EventPayload


def serialize_contact(contact: Contact) -> Dict[str, Any]:
    return ContactPayload.from_domain(contact).model_dump()


def serialize_event(event: Event) -> Dict[str, Any]:
    return EventPayload.from_domain(event).model_dump()


def _serialize_record(record: Any) -> Dict[str, Any]:
    if isinstance(record, Contact):
        return serialize_contact(record)
    if isinstance(record, Event):
        return serialize_event(record)
    raise TypeError(f"Cannot serialize record of type {type(record).__name__}")


def render_result(result: OperationResult) -> str:
    """Collapse a service result into the single string a tool returns."""

    if result.kind is ResultKind.ROWS:
        return orjson.dumps([_serialize_record(record) for record in result.records]).decode("utf-8")
    return result.message
