from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..colleges.repository import CollegeRepository
from ..core.enums import EventState
from ..core.exceptions import NotFoundError, ValidationError
from .model import Event, NewEvent
from .repository import EventRepository

logger = logging.getLogger(__name__)


class EventService:
    """Use case: create events and move them through draft -> published -> cancelled/completed."""

    def __init__(self, events: EventRepository, colleges: CollegeRepository):
        self._events = events
        self._colleges = colleges

    def create_event(self, data: NewEvent) -> Event:
        if not self._colleges.get_by_id(data.college_id):
            raise NotFoundError("College not found")

        event = self._events.create(data)
        logger.info("Event created: %s '%s' college=%s state=%s", event.event_id, event.title, event.college_id, event.state.value)
        return event

    def list_events(
        self,
        *,
        college_id: Optional[str] = None,
        state: Optional[str] = None,
        event_type: Optional[str] = None,
    ) -> Sequence[Event]:
        parsed_state = None
        if state:
            try:
                parsed_state = EventState(state.strip().lower())
            except ValueError:
                allowed = ", ".join(s.value for s in EventState)
                raise ValidationError(f"state must be one of: {allowed}")
        return self._events.list_events(college_id=college_id, state=parsed_state, event_type=event_type)

    def get_event(self, event_id: str) -> Event:
        event = self._events.get_by_id(event_id)
        if not event:
            raise NotFoundError("Event not found")
        return event

    def publish_event(self, event_id: str) -> Event:
        return self._transition(event_id, EventState.PUBLISHED, allowed_from={EventState.DRAFT})

    def complete_event(self, event_id: str) -> Event:
        return self._transition(event_id, EventState.COMPLETED, allowed_from={EventState.PUBLISHED})

    def cancel_event(self, event_id: str) -> Event:
        return self._transition(event_id, EventState.CANCELLED, allowed_from=set(EventState))

    def delete_event(self, event_id: str) -> None:
        self.get_event(event_id)
        if not self._events.delete_by_id(event_id):
            raise NotFoundError("Event not found")
        logger.info("Event deleted: %s", event_id)

    def _transition(self, event_id: str, target: EventState, *, allowed_from: set[EventState]) -> Event:
        event = self.get_event(event_id)
        if event.state not in allowed_from:
            raise ValidationError(f"Cannot move event from {event.state.value} to {target.value}")

        self._events.set_state(event_id, target)
        logger.info("Event %s: %s -> %s", event_id, event.state.value, target.value)
        return self.get_event(event_id)
