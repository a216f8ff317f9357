from __future__ import annotations

import sqlite3
from typing import Optional, Sequence, Tuple

from ..attendance.sqlite_attendance_repository import insert_missing_rows
from ..core.exceptions import NotFoundError
from ..database.connection import DatabaseConnection
from ..database.sqlite_base import db_cursor, fetchall, fetchone
from .model import Lesson
from .repository import LessonRepository


def _to_lesson(r: dict) -> Lesson:
    return Lesson(lesson_id=int(r["lesson_id"]), class_id=int(r["class_id"]), lesson_date=r["lesson_date"])


class SQLiteLessonRepository(LessonRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_class(self, class_id: int) -> Sequence[Lesson]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT lesson_id, class_id, lesson_date
                FROM lessons
                WHERE class_id=?
                ORDER BY lesson_date ASC, lesson_id ASC
                """,
                (int(class_id),),
            )
            return [_to_lesson(r) for r in fetchall(cur)]

    def get_by_id(self, lesson_id: int) -> Optional[Lesson]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT lesson_id, class_id, lesson_date FROM lessons WHERE lesson_id=?", (int(lesson_id),))
            r = fetchone(cur)
            return _to_lesson(r) if r else None

    def create_seeded(self, *, class_id: int, lesson_date: str) -> Tuple[int, int]:
        with db_cursor(self._conn_factory, immediate=True) as (_, cur):
            try:
                cur.execute("INSERT INTO lessons(class_id, lesson_date) VALUES(?,?)", (int(class_id), lesson_date))
            except sqlite3.IntegrityError:
                raise NotFoundError("Class not found")
            lesson_id = int(cur.lastrowid)
            seeded = insert_missing_rows(cur, lesson_id=lesson_id, class_id=class_id)
            return lesson_id, seeded

    def delete(self, *, lesson_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM lessons WHERE lesson_id=?", (int(lesson_id),))
            return cur.rowcount > 0
