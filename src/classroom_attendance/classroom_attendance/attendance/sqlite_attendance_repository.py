from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.sqlite_base import db_cursor, fetchall, fetchone
from .model import AttendanceEntry, AttendanceRow
from .repository import AttendanceRepository

_INSERT_MISSING_SQL = """
    INSERT INTO attendance(lesson_id, student_id, class_id, is_present)
    SELECT ?, s.student_id, s.class_id, 0
    FROM students s
    WHERE s.class_id = ?
      AND NOT EXISTS (
          SELECT 1 FROM attendance a
          WHERE a.lesson_id = ? AND a.student_id = s.student_id AND a.class_id = s.class_id
      )
"""


def insert_missing_rows(cur, *, lesson_id: int, class_id: int) -> int:
    """Seed absent rows on an open cursor so callers can share a transaction."""

    cur.execute(_INSERT_MISSING_SQL, (int(lesson_id), int(class_id), int(lesson_id)))
    return max(cur.rowcount, 0)


class SQLiteAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_lesson(self, *, lesson_id: int, class_id: int) -> Sequence[AttendanceRow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT s.student_id, s.first_name, s.last_name,
                       COALESCE(a.is_present, 0) AS is_present
                FROM students s
                LEFT JOIN attendance a
                  ON a.lesson_id = ? AND a.student_id = s.student_id AND a.class_id = s.class_id
                WHERE s.class_id = ?
                ORDER BY s.last_name, s.first_name, s.student_id
                """,
                (int(lesson_id), int(class_id)),
            )
            return [
                AttendanceRow(
                    student_id=r["student_id"],
                    first_name=r["first_name"],
                    last_name=r["last_name"],
                    is_present=bool(r["is_present"]),
                )
                for r in fetchall(cur)
            ]

    def get(self, *, lesson_id: int, class_id: int, student_id: str) -> Optional[AttendanceEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT lesson_id, student_id, class_id, is_present
                FROM attendance
                WHERE lesson_id=? AND class_id=? AND student_id=?
                """,
                (int(lesson_id), int(class_id), student_id),
            )
            r = fetchone(cur)
            if not r:
                return None
            return AttendanceEntry(
                lesson_id=int(r["lesson_id"]),
                student_id=r["student_id"],
                class_id=int(r["class_id"]),
                is_present=bool(r["is_present"]),
            )

    def set_presence(self, *, lesson_id: int, class_id: int, student_id: str, is_present: bool) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE attendance
                SET is_present=?
                WHERE lesson_id=? AND class_id=? AND student_id=?
                """,
                (1 if is_present else 0, int(lesson_id), int(class_id), student_id),
            )
            return cur.rowcount > 0

    def insert_missing(self, *, lesson_id: int, class_id: int) -> int:
        with db_cursor(self._conn_factory, immediate=True) as (_, cur):
            return insert_missing_rows(cur, lesson_id=lesson_id, class_id=class_id)
