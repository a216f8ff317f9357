from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Classroom:
    """Domain entity: a class. Root aggregate for students and lessons."""

    class_id: int
    name: str
    student_count: int = 0

    def to_dict(self) -> dict:
        return {"id": self.class_id, "name": self.name, "studentCount": self.student_count}
