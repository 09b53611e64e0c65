from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, new_id, where_clause
from .model import EventRatingStats, Feedback
from .repository import FeedbackRepository

_COLUMNS = "feedback_id, event_id, student_id, college_id, rating, comments, created_at"


def _to_feedback(row: dict) -> Feedback:
    return Feedback(
        feedback_id=row["feedback_id"],
        event_id=row["event_id"],
        student_id=row["student_id"],
        college_id=row["college_id"],
        rating=int(row["rating"]),
        comments=row.get("comments"),
        created_at=row.get("created_at"),
    )


class MySQLFeedbackRepository(FeedbackRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, feedback_id: str) -> Optional[Feedback]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM feedback WHERE feedback_id=%s", (feedback_id,))
            row = fetchone(cur)
            return _to_feedback(row) if row else None

    def list_for_event(self, event_id: str) -> Sequence[Feedback]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM feedback WHERE event_id=%s ORDER BY created_at DESC, feedback_id ASC",
                (event_id,),
            )
            return [_to_feedback(r) for r in fetchall(cur)]

    def create(
        self,
        *,
        event_id: str,
        student_id: str,
        college_id: str,
        rating: int,
        comments: Optional[str] = None,
    ) -> Feedback:
        feedback_id = new_id()
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO feedback(feedback_id, event_id, student_id, college_id, rating, comments)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (feedback_id, event_id, student_id, college_id, int(rating), comments),
            )
        return self.get_by_id(feedback_id)

    def rating_totals_by_event(self, *, college_id: Optional[str] = None) -> Sequence[EventRatingStats]:
        where, params = where_clause({"f.college_id": college_id})
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT f.event_id, SUM(f.rating) AS rating_sum, COUNT(f.feedback_id) AS feedback_count
                FROM feedback f
                {where}
                GROUP BY f.event_id
                """,
                params,
            )
            return [
                EventRatingStats(
                    event_id=r["event_id"],
                    rating_sum=int(r["rating_sum"] or 0),
                    feedback_count=int(r["feedback_count"] or 0),
                )
                for r in fetchall(cur)
            ]
