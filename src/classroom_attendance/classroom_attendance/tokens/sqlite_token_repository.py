from __future__ import annotations

import sqlite3
from datetime import datetime
from typing import Optional

from ..core.exceptions import NotFoundError
from ..database.connection import DatabaseConnection
from ..database.sqlite_base import db_cursor, fetchone
from .model import LessonToken
from .repository import TokenRepository


class SQLiteTokenRepository(TokenRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self, lesson_id: int) -> Optional[LessonToken]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT lesson_id, token, created_at FROM lesson_tokens WHERE lesson_id=?", (int(lesson_id),))
            r = fetchone(cur)
            if not r:
                return None
            return LessonToken(
                lesson_id=int(r["lesson_id"]),
                token=r["token"],
                created_at=datetime.fromisoformat(r["created_at"]),
            )

    def upsert(self, *, lesson_id: int, token: str, created_at: datetime) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            try:
                cur.execute(
                    """
                    INSERT INTO lesson_tokens(lesson_id, token, created_at)
                    VALUES(?,?,?)
                    ON CONFLICT(lesson_id) DO UPDATE SET token=excluded.token, created_at=excluded.created_at
                    """,
                    (int(lesson_id), token, created_at.isoformat()),
                )
            except sqlite3.IntegrityError:
                raise NotFoundError("Lesson not found")

    def delete(self, lesson_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM lesson_tokens WHERE lesson_id=?", (int(lesson_id),))
            return cur.rowcount > 0
