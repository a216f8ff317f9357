from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from datetime import datetime
from typing import Iterator, Optional

from ..core.exceptions import DuplicateOriginError
from ..database.connection import DatabaseConnection
from ..database.sqlite_base import db_cursor, fetchone, is_unique_violation
from .repository import CheckinRepository, CheckinTransaction


class SQLiteCheckinTransaction(CheckinTransaction):
    def __init__(self, cur: sqlite3.Cursor):
        self._cur = cur

    def get_token(self, lesson_id: int) -> Optional[str]:
        self._cur.execute("SELECT token FROM lesson_tokens WHERE lesson_id=?", (int(lesson_id),))
        r = fetchone(self._cur)
        return r["token"] if r else None

    def get_lesson_class(self, lesson_id: int) -> Optional[int]:
        self._cur.execute("SELECT class_id FROM lessons WHERE lesson_id=?", (int(lesson_id),))
        r = fetchone(self._cur)
        return int(r["class_id"]) if r else None

    def origin_registered(self, *, lesson_id: int, origin: str) -> bool:
        self._cur.execute(
            "SELECT 1 AS found FROM ip_registrations WHERE lesson_id=? AND ip_address=?",
            (int(lesson_id), origin),
        )
        return fetchone(self._cur) is not None

    def record_origin(self, *, lesson_id: int, origin: str, registered_at: datetime) -> None:
        try:
            self._cur.execute(
                "INSERT INTO ip_registrations(lesson_id, ip_address, registered_at) VALUES(?,?,?)",
                (int(lesson_id), origin, registered_at.isoformat()),
            )
        except sqlite3.IntegrityError as e:
            if is_unique_violation(e):
                raise DuplicateOriginError("This device has already registered attendance for this lesson")
            raise

    def mark_present(self, *, lesson_id: int, class_id: int, student_id: str) -> bool:
        self._cur.execute(
            """
            UPDATE attendance
            SET is_present=1
            WHERE lesson_id=? AND class_id=? AND student_id=?
            """,
            (int(lesson_id), int(class_id), student_id),
        )
        return self._cur.rowcount > 0


class SQLiteCheckinRepository(CheckinRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    @contextmanager
    def transaction(self) -> Iterator[SQLiteCheckinTransaction]:
        with db_cursor(self._conn_factory, immediate=True) as (_, cur):
            yield SQLiteCheckinTransaction(cur)
