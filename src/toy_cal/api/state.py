from __future__ import annotations

from dataclasses import dataclass, field

from ..services import ContactService, EventService, ServiceContext


@dataclass(slots=True)
class ApiState:
    context: ServiceContext = field(default_factory=ServiceContext)
    contacts: ContactService = field(init=False)
    events: EventService = field(init=False)

    def __post_init__(self) -> None:
        self.bind(self.context)

    def bind(self, context: ServiceContext) -> None:
        """Point every tool at ``context``'s database."""
        self.context = context
        self.contacts = ContactService(context.database)
        self.events = EventService(context.database)


api_state = ApiState()
