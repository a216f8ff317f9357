from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Student:
    """Domain entity: a student, identified by ``(student_id, class_id)``.

    The same ``student_id`` may exist independently in different classes.
    """

    student_id: str
    first_name: str
    last_name: str
    class_id: int

    def to_dict(self) -> dict:
        return {
            "studentId": self.student_id,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "classId": self.class_id,
        }
