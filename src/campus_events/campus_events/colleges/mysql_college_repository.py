from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, new_id
from .model import College
from .repository import CollegeRepository

_COLUMNS = "college_id, name, domain, created_at"


def _to_college(row: dict) -> College:
    return College(
        college_id=row["college_id"],
        name=row["name"],
        domain=row.get("domain"),
        created_at=row.get("created_at"),
    )


class MySQLCollegeRepository(CollegeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, college_id: str) -> Optional[College]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM colleges WHERE college_id=%s", (college_id,))
            row = fetchone(cur)
            return _to_college(row) if row else None

    def list_all(self) -> Sequence[College]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM colleges ORDER BY name ASC, college_id ASC")
            return [_to_college(r) for r in fetchall(cur)]

    def create(self, *, name: str, domain: Optional[str] = None, college_id: Optional[str] = None) -> College:
        college_id = college_id or new_id()
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO colleges(college_id, name, domain) VALUES(%s,%s,%s)",
                (college_id, name, domain),
            )
        return self.get_by_id(college_id)

    def delete_by_id(self, college_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM colleges WHERE college_id=%s", (college_id,))
            return cur.rowcount > 0
