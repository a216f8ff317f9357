from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from typing import Any, Dict, List, Optional

from ..core.exceptions import StorageError
from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True, immediate: bool = False):
    """Yield ``(conn, cur)`` inside one transaction.

    ``immediate=True`` takes the write lock up front (``BEGIN IMMEDIATE``) so
    reads made inside the block cannot be invalidated by a concurrent writer.
    Commits on success, rolls back on any exception. Driver errors leave as
    StorageError; domain errors raised inside the block pass through.
    """

    try:
        conn = conn_factory.connect(dictionary=dictionary)
    except sqlite3.Error as e:
        raise StorageError(f"Could not open database: {e}") from e
    try:
        cur = conn.cursor()
        try:
            if immediate:
                cur.execute("BEGIN IMMEDIATE")
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except sqlite3.Error as e:
        conn.rollback()
        raise StorageError(str(e)) from e
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def is_unique_violation(e: sqlite3.IntegrityError) -> bool:
    message = str(e).upper()
    return "UNIQUE" in message or "PRIMARY KEY" in message


def is_foreign_key_violation(e: sqlite3.IntegrityError) -> bool:
    return "FOREIGN KEY" in str(e).upper()
