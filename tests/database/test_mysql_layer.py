from __future__ import annotations

from pathlib import Path

import mysql.connector
import pytest
from mysql.connector import errorcode

from src.campus_events.campus_events.core.exceptions import ConflictError, NotFoundError, StoreError
from src.campus_events.campus_events.database.bootstrap import _iter_sql_statements, _strip_create_db_and_use
from src.campus_events.campus_events.database.connection import DBConfig, DatabaseConnection
from src.campus_events.campus_events.database.mysql_base import (
    db_cursor,
    placeholders,
    translate_mysql_error,
    where_clause,
)
from src.campus_events.campus_events.registrations.mysql_registration_repository import MySQLRegistrationRepository
from src.campus_events.campus_events.students.mysql_student_repository import MySQLStudentRepository

SCHEMA = Path(__file__).resolve().parents[2] / "database" / "schema.sql"


class FakeCursor:
    def __init__(self, rows=None, error=None):
        self.rows = rows or []
        self.error = error
        self.executed = []
        self.closed = False
        self.rowcount = 0

    def execute(self, sql, params=()):
        self.executed.append((" ".join(sql.split()), params))
        if self.error:
            raise self.error

    def fetchone(self):
        return self.rows[0] if self.rows else None

    def fetchall(self):
        return self.rows

    def close(self):
        self.closed = True


class FakeConnection:
    def __init__(self, cursor):
        self._cursor = cursor
        self.committed = False
        self.rolled_back = False
        self.closed = False

    def cursor(self, dictionary=False):
        return self._cursor

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


class FakeConnFactory:
    def __init__(self, cursor):
        self.cursor = cursor
        self.connections = []

    def connect(self):
        conn = FakeConnection(self.cursor)
        self.connections.append(conn)
        return conn


def _mysql_error(errno):
    return mysql.connector.errors.IntegrityError(msg="boom", errno=errno)


@pytest.mark.parametrize(
    "errno, expected",
    [
        (errorcode.ER_DUP_ENTRY, ConflictError),
        (errorcode.ER_NO_REFERENCED_ROW_2, NotFoundError),
        (errorcode.ER_NO_REFERENCED_ROW, NotFoundError),
        (errorcode.ER_BAD_FIELD_ERROR, StoreError),
    ],
)
def test_translate_mysql_error(errno, expected):
    assert isinstance(translate_mysql_error(_mysql_error(errno)), expected)


def test_db_cursor_commits_and_closes():
    factory = FakeConnFactory(FakeCursor())

    with db_cursor(factory) as (_, cur):
        cur.execute("SELECT 1")

    conn = factory.connections[0]
    assert conn.committed and conn.closed and not conn.rolled_back
    assert factory.cursor.closed


def test_db_cursor_rolls_back_and_translates_driver_errors():
    factory = FakeConnFactory(FakeCursor(error=_mysql_error(errorcode.ER_DUP_ENTRY)))

    with pytest.raises(ConflictError):
        with db_cursor(factory) as (_, cur):
            cur.execute("INSERT INTO registrations VALUES (%s)", ("x",))

    conn = factory.connections[0]
    assert conn.rolled_back and conn.closed and not conn.committed


class DeadConnFactory(FakeConnFactory):
    def connect(self):
        conn = super().connect()

        def lost():
            raise mysql.connector.errors.OperationalError(msg="Lost connection", errno=2013)

        conn.rollback = lost
        return conn


def test_db_cursor_translates_error_even_if_rollback_fails():
    factory = DeadConnFactory(FakeCursor(error=_mysql_error(errorcode.ER_DUP_ENTRY)))

    with pytest.raises(ConflictError):
        with db_cursor(factory) as (_, cur):
            cur.execute("INSERT INTO events VALUES (%s)", ("E001",))

    assert factory.connections[0].closed


def test_db_cursor_rolls_back_on_other_errors():
    factory = FakeConnFactory(FakeCursor())

    with pytest.raises(KeyError):
        with db_cursor(factory):
            raise KeyError("x")

    assert factory.connections[0].rolled_back


def test_where_clause_skips_unset_filters():
    assert where_clause({"r.college_id": None, "r.event_id": None}) == ("", ())
    assert where_clause({"r.college_id": "C001", "r.event_id": None}) == ("WHERE r.college_id=%s", ("C001",))
    assert placeholders(["a", "b", "c"]) == "%s,%s,%s"


def test_attendance_aggregate_groups_in_sql():
    cursor = FakeCursor(rows=[{"event_id": "E001", "total_registered": 14, "present_count": 6}])
    repo = MySQLRegistrationRepository(FakeConnFactory(cursor))

    [stats] = repo.attendance_by_event(college_id="C001")

    sql, params = cursor.executed[0]
    assert "GROUP BY r.event_id" in sql
    assert "WHERE r.college_id=%s" in sql
    assert params == ("C001",)
    assert (stats.total_registered, stats.present_count) == (14, 6)


def test_participation_treats_null_sums_as_zero():
    cursor = FakeCursor(rows=[{"student_id": "S001", "events_registered": 0, "events_attended": None}])
    repo = MySQLRegistrationRepository(FakeConnFactory(cursor))

    [stats] = repo.participation_by_student()

    assert stats.events_attended == 0
    assert cursor.executed[0][1] == ()


def test_get_many_is_one_query_and_skips_empty_input():
    cursor = FakeCursor(rows=[])
    factory = FakeConnFactory(cursor)
    repo = MySQLStudentRepository(factory)

    assert repo.get_many([]) == {}
    assert factory.connections == []

    repo.get_many(iter(["S002", "S001", "S002"]))
    assert len(cursor.executed) == 1
    assert cursor.executed[0][1] == ("S001", "S002")


def test_connection_must_be_opened_first():
    with pytest.raises(StoreError):
        DatabaseConnection(DBConfig.from_dict({})).connect()


def test_open_wraps_driver_errors(monkeypatch):
    def refuse(**kwargs):
        raise mysql.connector.errors.InterfaceError(msg="refused", errno=2003)

    monkeypatch.setattr(mysql.connector, "connect", refuse)
    conn = DatabaseConnection(DBConfig.from_dict({"database": "campus_events_test"}))

    with pytest.raises(StoreError, match="campus_events_test"):
        conn.open()
    assert not conn.is_open


def test_schema_file_splits_into_create_table_statements():
    sql = _strip_create_db_and_use(SCHEMA.read_text(encoding="utf-8"))

    statements = list(_iter_sql_statements(sql))

    assert len(statements) == 5
    assert all("CREATE TABLE IF NOT EXISTS" in s for s in statements)
