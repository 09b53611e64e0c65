from __future__ import annotations

import logging
import uuid
from contextlib import contextmanager
from typing import Any, Dict, List, Optional, Sequence

import mysql.connector
from mysql.connector import errorcode

from ..core.exceptions import ConflictError, DomainError, NotFoundError, StoreError
from .connection import DatabaseConnection

logger = logging.getLogger(__name__)


def translate_mysql_error(exc: mysql.connector.Error) -> DomainError:
    """Map driver errors onto the domain taxonomy (duplicate key -> conflict)."""
    if exc.errno == errorcode.ER_DUP_ENTRY:
        return ConflictError(f"Duplicate record: {exc.msg}")
    if exc.errno in (errorcode.ER_NO_REFERENCED_ROW, errorcode.ER_NO_REFERENCED_ROW_2):
        return NotFoundError(f"Referenced record does not exist: {exc.msg}")
    return StoreError(f"Database error: {exc.msg}")


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except mysql.connector.Error as exc:
        _rollback_quietly(conn)
        raise translate_mysql_error(exc) from exc
    except Exception:
        _rollback_quietly(conn)
        raise
    finally:
        conn.close()


def _rollback_quietly(conn) -> None:
    # A dead connection must not mask the error that triggered the rollback.
    try:
        conn.rollback()
    except mysql.connector.Error:
        logger.warning("Rollback failed", exc_info=True)


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def new_id() -> str:
    return str(uuid.uuid4())


def placeholders(values: Sequence[Any]) -> str:
    """``%s,%s,%s`` for an IN (...) clause."""
    return ",".join(["%s"] * len(values))


def where_clause(filters: Dict[str, Any]) -> tuple[str, tuple]:
    """Build ``WHERE a=%s AND b=%s`` from the non-None entries of ``filters``."""
    clauses = []
    params: list[object] = []
    for column, value in filters.items():
        if value is None:
            continue
        clauses.append(f"{column}=%s")
        params.append(value)
    if not clauses:
        return "", ()
    return "WHERE " + " AND ".join(clauses), tuple(params)
