from __future__ import annotations

from typing import Iterable, Mapping, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, new_id, placeholders, where_clause
from .model import Student
from .repository import StudentRepository

_COLUMNS = "student_id, student_roll, name, email, college_id, created_at"


def _to_student(row: dict) -> Student:
    return Student(
        student_id=row["student_id"],
        student_roll=row["student_roll"],
        college_id=row["college_id"],
        name=row.get("name"),
        email=row.get("email"),
        created_at=row.get("created_at"),
    )


class MySQLStudentRepository(StudentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, student_id: str) -> Optional[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM students WHERE student_id=%s", (student_id,))
            row = fetchone(cur)
            return _to_student(row) if row else None

    def get_many(self, student_ids: Iterable[str]) -> Mapping[str, Student]:
        ids = sorted(set(student_ids))
        if not ids:
            return {}
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM students WHERE student_id IN ({placeholders(ids)})",
                tuple(ids),
            )
            return {r["student_id"]: _to_student(r) for r in fetchall(cur)}

    def get_by_roll(self, *, student_roll: str, college_id: str) -> Optional[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM students WHERE student_roll=%s AND college_id=%s",
                (student_roll, college_id),
            )
            row = fetchone(cur)
            return _to_student(row) if row else None

    def list_for_college(self, college_id: Optional[str] = None) -> Sequence[Student]:
        where, params = where_clause({"college_id": college_id})
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM students {where} ORDER BY college_id ASC, student_roll ASC",
                params,
            )
            return [_to_student(r) for r in fetchall(cur)]

    def create(
        self,
        *,
        student_roll: str,
        college_id: str,
        name: Optional[str] = None,
        email: Optional[str] = None,
        student_id: Optional[str] = None,
    ) -> Student:
        student_id = student_id or new_id()
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO students(student_id, student_roll, name, email, college_id)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (student_id, student_roll, name, email, college_id),
            )
        return self.get_by_id(student_id)
