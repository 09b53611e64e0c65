from __future__ import annotations

import logging
import re
import uuid
from pathlib import Path
from typing import Iterable

import mysql.connector

from .connection import DBConfig

logger = logging.getLogger(__name__)

DEMO_COLLEGE = {"college_id": "C001", "name": "Reva University", "domain": "reva.edu"}

DEMO_EVENTS = [
    {"event_id": "E001", "title": "AI Workshop", "event_type": "workshop"},
    {"event_id": "E002", "title": "Tech Fest", "event_type": "fest"},
]

DEMO_STUDENT_NAMES = [
    "Akshay", "Priya", "Ravi", "Ananya", "Kavana", "Manoj", "Sneha", "Rahul", "Divya", "Arjun",
    "Meera", "Varun", "Snehal", "Pooja", "Deepak", "Harsha", "Nandini", "Sanjay", "Aishwarya", "Kiran",
]

# Attendance of the first 14 students at E001, repeating.
WORKSHOP_STATUS_CYCLE = ["present", "present", "absent", "registered", "late"]


def _connect(db_config: dict, *, with_database: bool = True):
    target = DBConfig.from_dict(db_config)
    kwargs = {
        "host": target.host,
        "port": target.port,
        "user": target.user,
        "password": target.password,
        "use_pure": True,
    }
    if with_database:
        kwargs["database"] = target.database
    return mysql.connector.connect(**kwargs)


def _strip_create_db_and_use(sql: str) -> str:
    # Keep schema.sql compatible regardless of DB name.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    sql = re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)
    return sql


def _iter_sql_statements(sql: str) -> Iterable[str]:
    # Minimal SQL splitter for schema files (handles ';' inside quotes).
    buf: list[str] = []
    in_single = False
    in_double = False
    escape = False

    for ch in sql:
        if escape:
            buf.append(ch)
            escape = False
            continue

        if ch == "\\":
            buf.append(ch)
            escape = True
            continue

        if ch == "'" and not in_double:
            in_single = not in_single
            buf.append(ch)
            continue

        if ch == '"' and not in_single:
            in_double = not in_double
            buf.append(ch)
            continue

        if ch == ";" and not in_single and not in_double:
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt:
                yield stmt
            continue

        buf.append(ch)

    tail = "".join(buf).strip()
    if tail:
        yield tail


def ensure_database_exists(db_config: dict) -> None:
    target = DBConfig.from_dict(db_config)
    conn = _connect(db_config, with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{target.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci;"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(db_config: dict, *, schema_path: str | Path) -> None:
    ensure_database_exists(db_config)
    sql = _strip_create_db_and_use(Path(schema_path).read_text(encoding="utf-8"))

    conn = _connect(db_config)
    try:
        cur = conn.cursor()
        for stmt in _iter_sql_statements(sql):
            cur.execute(stmt)
        conn.commit()
    finally:
        conn.close()


def seed_demo_data(db_config: dict) -> dict:
    """Reset the tables and load one college, two published events, 20 students,
    registrations with mixed attendance and a few feedback entries.

    Returns row counts per table.
    """
    conn = _connect(db_config)
    try:
        cur = conn.cursor()
        for table in ("feedback", "registrations", "students", "events", "colleges"):
            cur.execute(f"DELETE FROM {table}")

        college_id = DEMO_COLLEGE["college_id"]
        cur.execute(
            "INSERT INTO colleges(college_id, name, domain) VALUES(%s,%s,%s)",
            (college_id, DEMO_COLLEGE["name"], DEMO_COLLEGE["domain"]),
        )

        for ev in DEMO_EVENTS:
            cur.execute(
                """
                INSERT INTO events(event_id, college_id, title, event_type, state)
                VALUES(%s,%s,%s,%s,'published')
                """,
                (ev["event_id"], college_id, ev["title"], ev["event_type"]),
            )

        student_ids = []
        for i, name in enumerate(DEMO_STUDENT_NAMES, start=1):
            student_id = f"S{i:03d}"
            student_ids.append(student_id)
            cur.execute(
                """
                INSERT INTO students(student_id, student_roll, name, email, college_id)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (student_id, f"R{i:03d}", name, f"{name.lower()}@example.com", college_id),
            )

        workshop, fest = DEMO_EVENTS[0]["event_id"], DEMO_EVENTS[1]["event_id"]
        regs: list[tuple[str, str, str]] = []
        for i in range(14):
            regs.append((workshop, student_ids[i], WORKSHOP_STATUS_CYCLE[i % len(WORKSHOP_STATUS_CYCLE)]))
        for i in range(10):
            regs.append((fest, student_ids[i], ("present", "registered", "late")[i % 3]))
        # Kavana (S005) again for both events; first registration wins.
        regs.append((workshop, student_ids[4], "present"))
        regs.append((fest, student_ids[4], "present"))

        for event_id, student_id, status in regs:
            cur.execute(
                """
                INSERT IGNORE INTO registrations(registration_id, event_id, student_id, college_id, attendance_status)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (str(uuid.uuid4()), event_id, student_id, college_id, status),
            )

        feedback_rows = [
            (workshop, student_ids[0], 5, "Excellent workshop!"),
            (workshop, student_ids[1], 4, "Very useful."),
            (fest, student_ids[4], 3, "Good, could be better."),
            (fest, student_ids[9], 4, "Fun fest."),
        ]
        for event_id, student_id, rating, comments in feedback_rows:
            cur.execute(
                """
                INSERT INTO feedback(feedback_id, event_id, student_id, college_id, rating, comments)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (str(uuid.uuid4()), event_id, student_id, college_id, rating, comments),
            )

        conn.commit()

        counts = {}
        for table in ("colleges", "events", "students", "registrations", "feedback"):
            cur.execute(f"SELECT COUNT(*) FROM {table}")
            counts[table] = int(cur.fetchone()[0])
        logger.info("Seeded demo data: %s", counts)
        return counts
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def list_tables(db_config: dict) -> list[str]:
    conn = _connect(db_config)
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
