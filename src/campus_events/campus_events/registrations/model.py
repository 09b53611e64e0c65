from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import iso_or_none
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class Registration:
    """Domain entity: a student's enrollment in an event."""

    registration_id: str
    event_id: str
    student_id: str
    college_id: str
    registered_at: Optional[datetime] = None
    attendance_status: AttendanceStatus = AttendanceStatus.REGISTERED

    def to_dict(self) -> dict:
        return {
            "id": self.registration_id,
            "eventId": self.event_id,
            "studentId": self.student_id,
            "collegeId": self.college_id,
            "registeredAt": iso_or_none(self.registered_at),
            "attendanceStatus": self.attendance_status.value,
        }


@dataclass(frozen=True)
class NewRegistration:
    event_id: str
    student_roll: str
    college_id: str
    name: Optional[str] = None
    email: Optional[str] = None


@dataclass(frozen=True)
class AttendanceUpdate:
    event_id: str
    student_roll: str
    college_id: str
    status: AttendanceStatus


@dataclass(frozen=True)
class EventRegistrationCount:
    """Aggregate: registrations per event."""

    event_id: str
    registrations: int


@dataclass(frozen=True)
class EventAttendanceStats:
    """Aggregate: registrations and 'present' marks per event."""

    event_id: str
    total_registered: int
    present_count: int


@dataclass(frozen=True)
class StudentParticipationStats:
    """Aggregate: registrations and 'present' marks per student."""

    student_id: str
    events_registered: int
    events_attended: int
