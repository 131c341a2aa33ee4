from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..domain import Contact, Event


class ContactPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    email: Optional[str] = Field(default=None)
    phone: Optional[str] = Field(default=None)
    notes: Optional[str] = Field(default=None)

    @classmethod
    def from_domain(cls, contact: Contact) -> "ContactPayload":
        return cls(
            id=contact.id,
            name=contact.name,
            email=contact.email,
            phone=contact.phone,
            notes=contact.notes,
        )


class EventPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    heading: str
    description: Optional[str] = Field(default=None)
    start_time: int
    end_time: int

    @classmethod
    def from_domain(cls, event: Event) -> "EventPayload":
        return cls(
            id=event.id,
            heading=event.heading,
            description=event.description,
            start_time=event.start_time,
            end_time=event.end_time,
        )
