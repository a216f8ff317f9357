from __future__ import annotations

import sqlite3
from typing import Sequence

from ..core.exceptions import NotFoundError
from ..database.connection import DatabaseConnection
from ..database.sqlite_base import db_cursor, fetchall, is_foreign_key_violation
from .model import Student
from .repository import StudentRepository


def _to_student(r: dict) -> Student:
    return Student(
        student_id=r["student_id"],
        first_name=r["first_name"],
        last_name=r["last_name"],
        class_id=int(r["class_id"]),
    )


class SQLiteStudentRepository(StudentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_class(self, class_id: int) -> Sequence[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT student_id, first_name, last_name, class_id
                FROM students
                WHERE class_id=?
                ORDER BY last_name, first_name, student_id
                """,
                (int(class_id),),
            )
            return [_to_student(r) for r in fetchall(cur)]

    def create(self, student: Student) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            try:
                cur.execute(
                    """
                    INSERT INTO students(student_id, first_name, last_name, class_id)
                    VALUES(?,?,?,?)
                    """,
                    (student.student_id, student.first_name, student.last_name, int(student.class_id)),
                )
            except sqlite3.IntegrityError as e:
                if is_foreign_key_violation(e):
                    raise NotFoundError("Class not found")
                return False
            return True

    def delete(self, *, student_id: str, class_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM students WHERE student_id=? AND class_id=?", (student_id, int(class_id)))
            return cur.rowcount > 0
