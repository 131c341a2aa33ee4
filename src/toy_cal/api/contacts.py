from __future__ import annotations

from typing import Optional

from .registry import register_tool
from .serializers import render_result
from .state import api_state


@register_tool(
    "contacts-create",
    description="Creates a new contact.",
    category="contacts",
    tags=("write",),
)
def contacts_create(
    name: str,
    email: Optional[str] = None,
    phone: Optional[str] = None,
    notes: Optional[str] = None,
) -> str:
    return render_result(api_state.contacts.create(name, email=email, phone=phone, notes=notes))


@register_tool(
    "contacts-list",
    description="Lists all contacts, with optional sorting.",
    category="contacts",
    tags=("read",),
)
def contacts_list(orderBy: str = "name", order: str = "ASC") -> str:
    return render_result(api_state.contacts.list(order_by=orderBy, order=order))


@register_tool(
    "contacts-find",
    description="Finds contacts by a specific field (id, name, email, or phone).",
    category="contacts",
    tags=("read", "search"),
)
def contacts_find(field: str, value: str) -> str:
    return render_result(api_state.contacts.find(field, value))


@register_tool(
    "contacts-update",
    description="Updates an existing contact's details.",
    category="contacts",
    tags=("write",),
)
def contacts_update(
    id: int,
    name: Optional[str] = None,
    email: Optional[str] = None,
    phone: Optional[str] = None,
    notes: Optional[str] = None,
) -> str:
    return render_result(api_state.contacts.update(id, name=name, email=email, phone=phone, notes=notes))


@register_tool(
    "contacts-delete",
    description="Deletes a contact.",
    category="contacts",
    tags=("write",),
)
def contacts_delete(id: int) -> str:
    return render_result(api_state.contacts.delete(id))
