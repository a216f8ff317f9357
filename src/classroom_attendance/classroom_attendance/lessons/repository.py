from __future__ import annotations

from typing import Optional, Protocol, Sequence, Tuple

from .model import Lesson


class LessonRepository(Protocol):
    def list_for_class(self, class_id: int) -> Sequence[Lesson]:
        """Lessons of a class in ascending date order."""

        raise NotImplementedError

    def get_by_id(self, lesson_id: int) -> Optional[Lesson]:
        raise NotImplementedError

    def create_seeded(self, *, class_id: int, lesson_date: str) -> Tuple[int, int]:
        """Insert a lesson and one absent attendance row per current student.

        Returns ``(lesson_id, rows_seeded)``.
        """

        raise NotImplementedError

    def delete(self, *, lesson_id: int) -> bool:
        raise NotImplementedError
