"""Application services orchestrating data access and validation."""

from __future__ import annotations

from .contacts import ContactService
from .context import ServiceContext
from .events import EventService
from .results import OperationResult, ResultKind
from .validation import ValidationError

__all__ = [
    "ContactService",
    "EventService",
    "OperationResult",
    "ResultKind",
    "ServiceContext",
    "ValidationError",
]
