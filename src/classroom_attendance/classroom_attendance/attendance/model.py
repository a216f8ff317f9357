from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AttendanceEntry:
    """Domain entity: presence of one student in one lesson."""

    lesson_id: int
    student_id: str
    class_id: int
    is_present: bool

    def to_dict(self) -> dict:
        return {
            "lessonId": self.lesson_id,
            "studentId": self.student_id,
            "classId": self.class_id,
            "isPresent": self.is_present,
        }


@dataclass(frozen=True)
class AttendanceRow:
    """Read-model for the dashboard's attendance table."""

    student_id: str
    first_name: str
    last_name: str
    is_present: bool

    def to_dict(self) -> dict:
        return {
            "studentId": self.student_id,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "isPresent": self.is_present,
        }
