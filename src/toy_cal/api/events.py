from __future__ import annotations

from typing import Optional

from .registry import register_tool
from .serializers import render_result
from .state import api_state


@register_tool(
    "events-create",
    description="Creates a new event and optionally links it to a list of contact IDs.",
    category="events",
    tags=("write",),
)
def events_create(
    heading: str,
    startTime: int,
    endTime: int,
    description: Optional[str] = None,
    contactIds: Optional[list[int]] = None,
) -> str:
    result = api_state.events.create(
        heading,
        startTime,
        endTime,
        description=description,
        contact_ids=contactIds,
    )
    return render_result(result)


@register_tool(
    "events-list",
    description=(
        "Lists all events, ordered by start time. It is recommended to use the events-find tool "
        "instead as you can limit the number of results."
    ),
    category="events",
    tags=("read",),
)
def events_list() -> str:
    return render_result(api_state.events.list())


@register_tool(
    "events-find",
    description="Finds events that overlap with a given time range.",
    category="events",
    tags=("read", "search"),
)
def events_find(startTime: int, endTime: int) -> str:
    return render_result(api_state.events.find(startTime, endTime))


@register_tool(
    "events-update",
    description="Updates an existing event's details.",
    category="events",
    tags=("write",),
)
def events_update(
    id: int,
    heading: Optional[str] = None,
    startTime: Optional[int] = None,
    endTime: Optional[int] = None,
    description: Optional[str] = None,
) -> str:
    result = api_state.events.update(
        id,
        heading=heading,
        start_time=startTime,
        end_time=endTime,
        description=description,
    )
    return render_result(result)


@register_tool(
    "events-delete",
    description="Deletes an event and its associations.",
    category="events",
    tags=("write",),
)
def events_delete(id: int) -> str:
    return render_result(api_state.events.delete(id))
