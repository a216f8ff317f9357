from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import AttendanceEntry, AttendanceRow


class AttendanceRepository(Protocol):
    def list_for_lesson(self, *, lesson_id: int, class_id: int) -> Sequence[AttendanceRow]:
        """Every current student of the class; missing rows read as absent."""

        raise NotImplementedError

    def get(self, *, lesson_id: int, class_id: int, student_id: str) -> Optional[AttendanceEntry]:
        raise NotImplementedError

    def set_presence(self, *, lesson_id: int, class_id: int, student_id: str, is_present: bool) -> bool:
        raise NotImplementedError

    def insert_missing(self, *, lesson_id: int, class_id: int) -> int:
        """Insert an absent row for every student lacking one. Returns rows added."""

        raise NotImplementedError
