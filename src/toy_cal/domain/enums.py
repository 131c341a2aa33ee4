from __future__ import annotations

from enum import Enum
from typing import Optional


class ContactField(str, Enum):
    """Columns of ``contacts`` that callers may sort or search by."""

    ID = "id"
    NAME = "name"
    EMAIL = "email"
    PHONE = "phone"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"

    @classmethod
    def parse(cls, value: str) -> Optional["ContactField"]:
        try:
            return cls(value.lower())
        except ValueError:
            return None

    @property
    def column(self) -> str:
        return _CONTACT_COLUMNS[self]

    @property
    def searchable(self) -> bool:
        return self in SEARCHABLE_CONTACT_FIELDS


_CONTACT_COLUMNS = {
    ContactField.ID: "id",
    ContactField.NAME: "name",
    ContactField.EMAIL: "email",
    ContactField.PHONE: "phone",
    ContactField.CREATED_AT: "created_at",
    ContactField.UPDATED_AT: "updated_at",
}

SEARCHABLE_CONTACT_FIELDS = (
    ContactField.ID,
    ContactField.NAME,
    ContactField.EMAIL,
    ContactField.PHONE,
)


class SortOrder(str, Enum):
    ASC = "ASC"
    DESC = "DESC"

    @classmethod
    def normalize(cls, value: Optional[str]) -> "SortOrder":
        if value is not None and value.upper() == cls.DESC.value:
            return cls.DESC
        return cls.ASC
