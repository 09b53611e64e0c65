from __future__ import annotations

from typing import Iterable, Mapping, Optional, Sequence

from ..core.enums import EventState
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, new_id, placeholders, where_clause
from .model import Event, NewEvent
from .repository import EventRepository

_COLUMNS = """
    event_id, college_id, title, description, event_type, start_time, end_time,
    location, state, event_code, created_at, updated_at
"""


def _to_event(row: dict) -> Event:
    return Event(
        event_id=row["event_id"],
        college_id=row["college_id"],
        title=row["title"],
        state=EventState(row["state"]),
        description=row.get("description"),
        event_type=row.get("event_type"),
        start_time=row.get("start_time"),
        end_time=row.get("end_time"),
        location=row.get("location"),
        event_code=row.get("event_code"),
        created_at=row.get("created_at"),
        updated_at=row.get("updated_at"),
    )


class MySQLEventRepository(EventRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, event_id: str) -> Optional[Event]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM events WHERE event_id=%s", (event_id,))
            row = fetchone(cur)
            return _to_event(row) if row else None

    def get_many(self, event_ids: Iterable[str]) -> Mapping[str, Event]:
        ids = sorted(set(event_ids))
        if not ids:
            return {}
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM events WHERE event_id IN ({placeholders(ids)})",
                tuple(ids),
            )
            return {r["event_id"]: _to_event(r) for r in fetchall(cur)}

    def list_events(
        self,
        *,
        college_id: Optional[str] = None,
        state: Optional[EventState] = None,
        event_type: Optional[str] = None,
    ) -> Sequence[Event]:
        where, params = where_clause(
            {
                "college_id": college_id,
                "state": state.value if state else None,
                "event_type": event_type,
            }
        )
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM events
                {where}
                ORDER BY start_time ASC, event_id ASC
                """,
                params,
            )
            return [_to_event(r) for r in fetchall(cur)]

    def create(self, data: NewEvent) -> Event:
        event_id = data.event_id or new_id()
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO events(
                    event_id, college_id, title, description, event_type,
                    start_time, end_time, location, state, event_code
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    event_id,
                    data.college_id,
                    data.title,
                    data.description,
                    data.event_type,
                    data.start_time,
                    data.end_time,
                    data.location,
                    data.state.value,
                    data.event_code,
                ),
            )
        return self.get_by_id(event_id)

    def set_state(self, event_id: str, state: EventState) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE events SET state=%s WHERE event_id=%s", (state.value, event_id))
            return cur.rowcount > 0

    def delete_by_id(self, event_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM events WHERE event_id=%s", (event_id,))
            return cur.rowcount > 0
