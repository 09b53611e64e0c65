from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import iso_or_none


@dataclass(frozen=True)
class Feedback:
    """Domain entity: a student's rating of an event."""

    feedback_id: str
    event_id: str
    student_id: str
    college_id: str
    rating: int
    comments: Optional[str] = None
    created_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "id": self.feedback_id,
            "eventId": self.event_id,
            "studentId": self.student_id,
            "collegeId": self.college_id,
            "rating": self.rating,
            "comments": self.comments,
            "createdAt": iso_or_none(self.created_at),
        }


@dataclass(frozen=True)
class NewFeedback:
    event_id: str
    student_roll: str
    college_id: str
    rating: int
    comments: Optional[str] = None


@dataclass(frozen=True)
class EventRatingStats:
    """Aggregate: sum and count of ratings per event."""

    event_id: str
    rating_sum: int
    feedback_count: int
