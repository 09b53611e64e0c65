from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import iso_or_none
from ..core.enums import EventState


@dataclass(frozen=True)
class Event:
    """Domain entity: an event hosted by a college."""

    event_id: str
    college_id: str
    title: str
    state: EventState = EventState.DRAFT
    description: Optional[str] = None
    event_type: Optional[str] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    location: Optional[str] = None
    event_code: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "id": self.event_id,
            "collegeId": self.college_id,
            "title": self.title,
            "description": self.description,
            "type": self.event_type,
            "startTime": iso_or_none(self.start_time),
            "endTime": iso_or_none(self.end_time),
            "location": self.location,
            "state": self.state.value,
            "eventCode": self.event_code,
            "createdAt": iso_or_none(self.created_at),
            "updatedAt": iso_or_none(self.updated_at),
        }


@dataclass(frozen=True)
class NewEvent:
    college_id: str
    title: str
    state: EventState = EventState.DRAFT
    description: Optional[str] = None
    event_type: Optional[str] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    location: Optional[str] = None
    event_code: Optional[str] = None
    event_id: Optional[str] = None
