from __future__ import annotations

from enum import Enum


class EventState(str, Enum):
    """Lifecycle state of an event."""

    DRAFT = "draft"
    PUBLISHED = "published"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


class AttendanceStatus(str, Enum):
    """Attendance state stored on a registration."""

    REGISTERED = "registered"
    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"
