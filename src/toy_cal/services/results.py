from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Sequence


class ResultKind(str, Enum):
    OK = "ok"
    ROWS = "rows"
    EMPTY = "empty"
    INVALID = "invalid"
    NOT_FOUND = "not_found"
    DATABASE_ERROR = "database_error"


@dataclass(frozen=True, slots=True)
class OperationResult:
    """Outcome of a service call before it is flattened to a tool response.

    ``message`` carries the sentence callers see for every kind except
    ``ROWS``, whose ``records`` are serialized to JSON instead.  ``value``
    holds the generated id for successful creates.
    """

    kind: ResultKind
    message: str = ""
    records: tuple[Any, ...] = ()
    value: Optional[int] = None

    @classmethod
    def ok(cls, message: str, *, value: Optional[int] = None) -> "OperationResult":
        return cls(ResultKind.OK, message=message, value=value)

    @classmethod
    def rows(cls, records: Sequence[Any], *, empty_message: str) -> "OperationResult":
        if not records:
            return cls(ResultKind.EMPTY, message=empty_message)
        return cls(ResultKind.ROWS, records=tuple(records))

    @classmethod
    def invalid(cls, reason: str) -> "OperationResult":
        return cls(ResultKind.INVALID, message=reason)

    @classmethod
    def not_found(cls, message: str) -> "OperationResult":
        return cls(ResultKind.NOT_FOUND, message=message)

    @classmethod
    def database_error(cls, message: str) -> "OperationResult":
        return cls(ResultKind.DATABASE_ERROR, message=message)
