from __future__ import annotations

import logging
from typing import Sequence

from ..core.enums import EventState
from ..core.exceptions import ConflictError, NotFoundError, ValidationError
from ..events.repository import EventRepository
from ..students.service import StudentService
from .model import AttendanceUpdate, NewRegistration, Registration
from .repository import RegistrationRepository

logger = logging.getLogger(__name__)


class RegistrationService:
    """Use case: register students for events and record attendance."""

    def __init__(
        self,
        registrations: RegistrationRepository,
        events: EventRepository,
        students: StudentService,
    ):
        self._registrations = registrations
        self._events = events
        self._students = students

    def register(self, data: NewRegistration) -> Registration:
        event = self._events.get_by_id(data.event_id)
        if not event:
            raise NotFoundError("Event not found")
        if event.state != EventState.PUBLISHED:
            logger.warning("Registration rejected: event %s is %s", event.event_id, event.state.value)
            raise ValidationError("Event is not published")
        if event.college_id != data.college_id:
            raise ValidationError("Event does not belong to this college")

        student = self._students.get_or_create(
            student_roll=data.student_roll,
            college_id=data.college_id,
            name=data.name,
            email=data.email,
        )

        try:
            registration = self._registrations.create(
                event_id=event.event_id,
                student_id=student.student_id,
                college_id=data.college_id,
            )
        except ConflictError as exc:
            logger.warning("Duplicate registration: event=%s roll=%s", event.event_id, data.student_roll)
            raise ConflictError("Already registered") from exc

        logger.info("Registered roll=%s for event=%s", data.student_roll, event.event_id)
        return registration

    def update_attendance(self, data: AttendanceUpdate) -> Registration:
        student = self._students.find_by_roll(student_roll=data.student_roll, college_id=data.college_id)
        registration = self._registrations.get_for_event_and_student(
            event_id=data.event_id,
            student_id=student.student_id,
        )
        if not registration:
            raise NotFoundError("Registration not found")

        self._registrations.set_attendance(registration.registration_id, data.status)
        logger.info(
            "Attendance for roll=%s event=%s: %s -> %s",
            data.student_roll,
            data.event_id,
            registration.attendance_status.value,
            data.status.value,
        )
        updated = self._registrations.get_by_id(registration.registration_id)
        if not updated:
            raise NotFoundError("Registration not found")
        return updated

    def list_for_event(self, event_id: str) -> Sequence[Registration]:
        if not self._events.get_by_id(event_id):
            raise NotFoundError("Event not found")
        return self._registrations.list_for_event(event_id)
