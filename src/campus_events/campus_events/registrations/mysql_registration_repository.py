from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, new_id, where_clause
from .model import (
    EventAttendanceStats,
    EventRegistrationCount,
    Registration,
    StudentParticipationStats,
)
from .repository import RegistrationRepository

_COLUMNS = "registration_id, event_id, student_id, college_id, registered_at, attendance_status"

_PRESENT_SUM = "SUM(CASE WHEN r.attendance_status = 'present' THEN 1 ELSE 0 END)"


def _to_registration(row: dict) -> Registration:
    return Registration(
        registration_id=row["registration_id"],
        event_id=row["event_id"],
        student_id=row["student_id"],
        college_id=row["college_id"],
        registered_at=row.get("registered_at"),
        attendance_status=AttendanceStatus(row["attendance_status"]),
    )


class MySQLRegistrationRepository(RegistrationRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, registration_id: str) -> Optional[Registration]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM registrations WHERE registration_id=%s", (registration_id,))
            row = fetchone(cur)
            return _to_registration(row) if row else None

    def get_for_event_and_student(self, *, event_id: str, student_id: str) -> Optional[Registration]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM registrations WHERE event_id=%s AND student_id=%s",
                (event_id, student_id),
            )
            row = fetchone(cur)
            return _to_registration(row) if row else None

    def list_for_event(self, event_id: str) -> Sequence[Registration]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM registrations
                WHERE event_id=%s
                ORDER BY registered_at ASC, registration_id ASC
                """,
                (event_id,),
            )
            return [_to_registration(r) for r in fetchall(cur)]

    def create(self, *, event_id: str, student_id: str, college_id: str) -> Registration:
        registration_id = new_id()
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO registrations(registration_id, event_id, student_id, college_id, attendance_status)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (registration_id, event_id, student_id, college_id, AttendanceStatus.REGISTERED.value),
            )
        return self.get_by_id(registration_id)

    def set_attendance(self, registration_id: str, status: AttendanceStatus) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE registrations SET attendance_status=%s WHERE registration_id=%s",
                (status.value, registration_id),
            )
            return cur.rowcount > 0

    def count_by_event(self, *, college_id: Optional[str] = None) -> Sequence[EventRegistrationCount]:
        where, params = where_clause({"r.college_id": college_id})
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT r.event_id, COUNT(r.registration_id) AS registrations
                FROM registrations r
                {where}
                GROUP BY r.event_id
                """,
                params,
            )
            return [
                EventRegistrationCount(event_id=r["event_id"], registrations=int(r["registrations"] or 0))
                for r in fetchall(cur)
            ]

    def attendance_by_event(
        self,
        *,
        college_id: Optional[str] = None,
        event_id: Optional[str] = None,
    ) -> Sequence[EventAttendanceStats]:
        where, params = where_clause({"r.college_id": college_id, "r.event_id": event_id})
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT r.event_id,
                       COUNT(r.registration_id) AS total_registered,
                       {_PRESENT_SUM} AS present_count
                FROM registrations r
                {where}
                GROUP BY r.event_id
                """,
                params,
            )
            return [
                EventAttendanceStats(
                    event_id=r["event_id"],
                    total_registered=int(r["total_registered"] or 0),
                    present_count=int(r["present_count"] or 0),
                )
                for r in fetchall(cur)
            ]

    def participation_by_student(self, *, college_id: Optional[str] = None) -> Sequence[StudentParticipationStats]:
        where, params = where_clause({"r.college_id": college_id})
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT r.student_id,
                       COUNT(r.registration_id) AS events_registered,
                       {_PRESENT_SUM} AS events_attended
                FROM registrations r
                {where}
                GROUP BY r.student_id
                """,
                params,
            )
            return [
                StudentParticipationStats(
                    student_id=r["student_id"],
                    events_registered=int(r["events_registered"] or 0),
                    events_attended=int(r["events_attended"] or 0),
                )
                for r in fetchall(cur)
            ]
