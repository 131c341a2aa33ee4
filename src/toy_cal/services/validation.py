from __future__ import annotations

from typing import Any, Iterable, Optional


class ValidationError(ValueError):
    """Raised when input breaks a business rule; the message is caller-facing."""


NO_UPDATE_FIELDS = "Error: No fields provided to update."


def require_text(value: Optional[str], message: str) -> str:
    if value is None or not value.strip():
        raise ValidationError(message)
    return value.strip()


def require_time_order(start_time: int, end_time: int) -> None:
    if end_time < start_time:
        raise ValidationError("Error: End time cannot be before start time.")


def build_assignments(
    columns: Iterable[tuple[str, Any]],
    *,
    timestamp: int,
) -> tuple[str, list[Any]]:
    """Return ``"a = ?, b = ?, updated_at = ?"`` and its parameters.

    Only pairs whose value is not ``None`` are kept.  Column names come
    from callers' fixed tuples, never from request input.
    """

    fields: list[str] = []
    params: list[Any] = []
    for column, value in columns:
        if value is None:
            continue
        fields.append(f"{column} = ?")
        params.append(value)
    if not fields:
        raise ValidationError(NO_UPDATE_FIELDS)
    fields.append("updated_at = ?")
    params.append(timestamp)
    return ", ".join(fields), params
