from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class EventPopularityRow:
    event_id: str
    title: Optional[str]
    registrations: int

    def to_dict(self) -> dict:
        return {"eventId": self.event_id, "title": self.title, "registrations": self.registrations}


@dataclass(frozen=True)
class AttendancePercentRow:
    event_id: str
    title: Optional[str]
    total_registered: int
    present_count: int
    attendance_percent: float

    def to_dict(self) -> dict:
        return {
            "eventId": self.event_id,
            "title": self.title,
            "totalRegistered": self.total_registered,
            "presentCount": self.present_count,
            "attendancePercent": self.attendance_percent,
        }


@dataclass(frozen=True)
class AverageFeedbackRow:
    event_id: str
    title: Optional[str]
    avg_rating: float
    feedback_count: int

    def to_dict(self) -> dict:
        return {
            "eventId": self.event_id,
            "title": self.title,
            "avgRating": self.avg_rating,
            "feedbackCount": self.feedback_count,
        }


@dataclass(frozen=True)
class StudentParticipationRow:
    student_id: str
    student_roll: Optional[str]
    name: Optional[str]
    events_registered: int
    events_attended: int

    def to_dict(self) -> dict:
        return {
            "studentId": self.student_id,
            "studentRoll": self.student_roll,
            "name": self.name,
            "eventsRegistered": self.events_registered,
            "eventsAttended": self.events_attended,
        }


@dataclass(frozen=True)
class TopActiveStudentRow:
    student_id: str
    student_roll: Optional[str]
    name: Optional[str]
    attended: int

    def to_dict(self) -> dict:
        return {
            "studentId": self.student_id,
            "studentRoll": self.student_roll,
            "name": self.name,
            "attended": self.attended,
        }
