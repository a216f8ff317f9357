from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Lesson:
    """Domain entity: one attendance-taking session of a class."""

    lesson_id: int
    class_id: int
    lesson_date: str

    def to_dict(self) -> dict:
        return {"id": self.lesson_id, "classId": self.class_id, "date": self.lesson_date}
