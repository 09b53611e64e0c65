from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import (
    EventAttendanceStats,
    EventRegistrationCount,
    Registration,
    StudentParticipationStats,
)


class RegistrationRepository(Protocol):
    def get_by_id(self, registration_id: str) -> Optional[Registration]:
        raise NotImplementedError

    def get_for_event_and_student(self, *, event_id: str, student_id: str) -> Optional[Registration]:
        raise NotImplementedError

    def list_for_event(self, event_id: str) -> Sequence[Registration]:
        raise NotImplementedError

    def create(self, *, event_id: str, student_id: str, college_id: str) -> Registration:
        """Insert a registration; raises ConflictError when (event_id, student_id) exists."""

        raise NotImplementedError

    def set_attendance(self, registration_id: str, status: AttendanceStatus) -> bool:
        raise NotImplementedError

    # Aggregates (read-only, grouped in the store)
    def count_by_event(self, *, college_id: Optional[str] = None) -> Sequence[EventRegistrationCount]:
        raise NotImplementedError

    def attendance_by_event(
        self,
        *,
        college_id: Optional[str] = None,
        event_id: Optional[str] = None,
    ) -> Sequence[EventAttendanceStats]:
        raise NotImplementedError

    def participation_by_student(self, *, college_id: Optional[str] = None) -> Sequence[StudentParticipationStats]:
        raise NotImplementedError
