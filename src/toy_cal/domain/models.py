from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional


@dataclass(slots=True)
class Contact:
    id: int
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    notes: Optional[str] = None
    created_at: Optional[int] = None
    updated_at: Optional[int] = None

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Contact":
        keys = record.keys()
        return cls(
            id=int(record["id"]),
            name=str(record["name"]),
            email=record["email"],
            phone=record["phone"],
            notes=record["notes"],
            created_at=record["created_at"] if "created_at" in keys else None,
            updated_at=record["updated_at"] if "updated_at" in keys else None,
        )


@dataclass(slots=True)
class Event:
    id: int
    heading: str
    start_time: int
    end_time: int
    description: Optional[str] = None
    created_at: Optional[int] = None
    updated_at: Optional[int] = None

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Event":
        keys = record.keys()
        return cls(
            id=int(record["id"]),
            heading=str(record["heading"]),
            start_time=int(record["start_time"]),
            end_time=int(record["end_time"]),
            description=record["description"],
            created_at=record["created_at"] if "created_at" in keys else None,
            updated_at=record["updated_at"] if "updated_at" in keys else None,
        )


@dataclass(frozen=True, slots=True)
class EventContactLink:
    event_id: int
    contact_id: int
