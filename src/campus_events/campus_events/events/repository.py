from __future__ import annotations

from typing import Iterable, Mapping, Optional, Protocol, Sequence

from ..core.enums import EventState
from .model import Event, NewEvent


class EventRepository(Protocol):
    def get_by_id(self, event_id: str) -> Optional[Event]:
        raise NotImplementedError

    def get_many(self, event_ids: Iterable[str]) -> Mapping[str, Event]:
        """Batch lookup used for report enrichment; unknown ids are simply absent."""

        raise NotImplementedError

    def list_events(
        self,
        *,
        college_id: Optional[str] = None,
        state: Optional[EventState] = None,
        event_type: Optional[str] = None,
    ) -> Sequence[Event]:
        raise NotImplementedError

    def create(self, data: NewEvent) -> Event:
        raise NotImplementedError

    def set_state(self, event_id: str, state: EventState) -> bool:
        raise NotImplementedError

    def delete_by_id(self, event_id: str) -> bool:
        """Hard delete; the store cascades to registrations and feedback."""

        raise NotImplementedError
