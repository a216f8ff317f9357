from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.sqlite_base import db_cursor, fetchall, fetchone
from .model import Classroom
from .repository import ClassRepository

_SELECT_WITH_COUNT = """
    SELECT c.class_id, c.name, COUNT(s.student_id) AS student_count
    FROM classes c
    LEFT JOIN students s ON s.class_id = c.class_id
"""


def _to_classroom(r: dict) -> Classroom:
    return Classroom(class_id=int(r["class_id"]), name=r["name"], student_count=int(r["student_count"] or 0))


class SQLiteClassRepository(ClassRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Classroom]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT_WITH_COUNT + " GROUP BY c.class_id, c.name ORDER BY c.class_id")
            return [_to_classroom(r) for r in fetchall(cur)]

    def get_by_id(self, class_id: int) -> Optional[Classroom]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _SELECT_WITH_COUNT + " WHERE c.class_id=? GROUP BY c.class_id, c.name",
                (int(class_id),),
            )
            r = fetchone(cur)
            return _to_classroom(r) if r else None

    def create(self, *, name: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("INSERT INTO classes(name) VALUES(?)", (name,))
            return int(cur.lastrowid)

    def rename(self, *, class_id: int, name: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE classes SET name=? WHERE class_id=?", (name, int(class_id)))
            return cur.rowcount > 0

    def delete(self, *, class_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM classes WHERE class_id=?", (int(class_id),))
            return cur.rowcount > 0
