from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import EventRatingStats, Feedback


class FeedbackRepository(Protocol):
    def get_by_id(self, feedback_id: str) -> Optional[Feedback]:
        raise NotImplementedError

    def list_for_event(self, event_id: str) -> Sequence[Feedback]:
        raise NotImplementedError

    def create(
        self,
        *,
        event_id: str,
        student_id: str,
        college_id: str,
        rating: int,
        comments: Optional[str] = None,
    ) -> Feedback:
        raise NotImplementedError

    def rating_totals_by_event(self, *, college_id: Optional[str] = None) -> Sequence[EventRatingStats]:
        raise NotImplementedError
