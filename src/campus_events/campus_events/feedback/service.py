from __future__ import annotations

import logging
from typing import Sequence

from ..core.exceptions import NotFoundError, ValidationError
from ..events.repository import EventRepository
from ..students.service import StudentService
from .model import Feedback, NewFeedback
from .repository import FeedbackRepository

logger = logging.getLogger(__name__)


class FeedbackService:
    def __init__(self, feedback: FeedbackRepository, events: EventRepository, students: StudentService):
        self._feedback = feedback
        self._events = events
        self._students = students

    def submit(self, data: NewFeedback) -> Feedback:
        student = self._students.find_by_roll(student_roll=data.student_roll, college_id=data.college_id)

        event = self._events.get_by_id(data.event_id)
        if not event:
            raise NotFoundError("Event not found")
        if event.college_id != data.college_id:
            raise ValidationError("Event does not belong to this college")

        feedback = self._feedback.create(
            event_id=event.event_id,
            student_id=student.student_id,
            college_id=data.college_id,
            rating=data.rating,
            comments=data.comments,
        )
        logger.info("Feedback %s for event=%s rating=%d", feedback.feedback_id, event.event_id, data.rating)
        return feedback

    def list_for_event(self, event_id: str) -> Sequence[Feedback]:
        if not self._events.get_by_id(event_id):
            raise NotFoundError("Event not found")
        return self._feedback.list_for_event(event_id)
