from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, Optional

from ..common.numbers import mean, percentage
from ..core.constants import TOP_ACTIVE_STUDENTS_LIMIT
from ..core.exceptions import NotFoundError
from ..events.repository import EventRepository
from ..feedback.repository import FeedbackRepository
from ..registrations.repository import RegistrationRepository
from ..students.repository import StudentRepository
from .model import (
    AttendancePercentRow,
    AverageFeedbackRow,
    EventPopularityRow,
    StudentParticipationRow,
    TopActiveStudentRow,
)

logger = logging.getLogger(__name__)

REPORT_NAMES = (
    "event-popularity",
    "attendance-percent",
    "avg-feedback",
    "student-participation",
    "top-active-students",
)


class ReportService:
    """Read-only aggregate reports over registrations and feedback.

    Grouping happens in the store; this class derives the metrics, fixes a
    deterministic order (ties broken by id ascending) and enriches rows with
    event titles or student names through one batched lookup per report. A
    referenced row that no longer exists yields ``None`` instead of an error.
    """

    def __init__(
        self,
        registrations: RegistrationRepository,
        feedback: FeedbackRepository,
        events: EventRepository,
        students: StudentRepository,
        *,
        top_limit: int = TOP_ACTIVE_STUDENTS_LIMIT,
    ):
        self._registrations = registrations
        self._feedback = feedback
        self._events = events
        self._students = students
        self._top_limit = top_limit

    def event_popularity(self, *, college_id: Optional[str] = None) -> list[EventPopularityRow]:
        counts = sorted(
            self._registrations.count_by_event(college_id=college_id),
            key=lambda c: (-c.registrations, c.event_id),
        )
        titles = self._event_titles(c.event_id for c in counts)
        return [
            EventPopularityRow(event_id=c.event_id, title=titles.get(c.event_id), registrations=c.registrations)
            for c in counts
        ]

    def attendance_percent(
        self,
        *,
        college_id: Optional[str] = None,
        event_id: Optional[str] = None,
    ) -> list[AttendancePercentRow]:
        stats = sorted(
            self._registrations.attendance_by_event(college_id=college_id, event_id=event_id),
            key=lambda s: s.event_id,
        )
        titles = self._event_titles(s.event_id for s in stats)
        return [
            AttendancePercentRow(
                event_id=s.event_id,
                title=titles.get(s.event_id),
                total_registered=s.total_registered,
                present_count=s.present_count,
                attendance_percent=percentage(s.present_count, s.total_registered),
            )
            for s in stats
        ]

    def avg_feedback(self, *, college_id: Optional[str] = None) -> list[AverageFeedbackRow]:
        stats = sorted(
            (s for s in self._feedback.rating_totals_by_event(college_id=college_id) if s.feedback_count > 0),
            key=lambda s: s.event_id,
        )
        titles = self._event_titles(s.event_id for s in stats)
        return [
            AverageFeedbackRow(
                event_id=s.event_id,
                title=titles.get(s.event_id),
                avg_rating=mean(s.rating_sum, s.feedback_count),
                feedback_count=s.feedback_count,
            )
            for s in stats
        ]

    def student_participation(self, *, college_id: Optional[str] = None) -> list[StudentParticipationRow]:
        stats = self._ranked_participation(college_id)
        students = self._students.get_many(s.student_id for s in stats)
        rows = []
        for s in stats:
            student = students.get(s.student_id)
            rows.append(
                StudentParticipationRow(
                    student_id=s.student_id,
                    student_roll=student.student_roll if student else None,
                    name=student.name if student else None,
                    events_registered=s.events_registered,
                    events_attended=s.events_attended,
                )
            )
        return rows

    def top_active_students(self, *, college_id: Optional[str] = None) -> list[TopActiveStudentRow]:
        stats = self._ranked_participation(college_id)[: self._top_limit]
        students = self._students.get_many(s.student_id for s in stats)
        rows = []
        for s in stats:
            student = students.get(s.student_id)
            rows.append(
                TopActiveStudentRow(
                    student_id=s.student_id,
                    student_roll=student.student_roll if student else None,
                    name=student.name if student else None,
                    attended=s.events_attended,
                )
            )
        return rows

    def run(self, name: str, params: Mapping[str, Any]) -> list[dict]:
        """Run a report by its public name; ``params`` may carry collegeId / eventId."""
        reports: dict[str, Callable[[], list]] = {
            "event-popularity": lambda: self.event_popularity(college_id=_param(params, "collegeId")),
            "attendance-percent": lambda: self.attendance_percent(
                college_id=_param(params, "collegeId"),
                event_id=_param(params, "eventId"),
            ),
            "avg-feedback": lambda: self.avg_feedback(college_id=_param(params, "collegeId")),
            "student-participation": lambda: self.student_participation(college_id=_param(params, "collegeId")),
            "top-active-students": lambda: self.top_active_students(college_id=_param(params, "collegeId")),
        }
        build = reports.get(name)
        if build is None:
            raise NotFoundError(f"Unknown report: {name}")

        rows = [row.to_dict() for row in build()]
        logger.debug("Report %s params=%s rows=%d", name, dict(params), len(rows))
        return rows

    def _ranked_participation(self, college_id: Optional[str]):
        return sorted(
            self._registrations.participation_by_student(college_id=college_id),
            key=lambda s: (-s.events_attended, s.student_id),
        )

    def _event_titles(self, event_ids) -> dict[str, Optional[str]]:
        events = self._events.get_many(event_ids)
        return {event_id: event.title for event_id, event in events.items()}


def _param(params: Mapping[str, Any], key: str) -> Optional[str]:
    value = params.get(key)
    if value is None:
        return None
    value = str(value).strip()
    return value or None
