from __future__ import annotations

from typing import Protocol, Sequence

from .model import Student


class StudentRepository(Protocol):
    def list_for_class(self, class_id: int) -> Sequence[Student]:
        raise NotImplementedError

    def create(self, student: Student) -> bool:
        """Insert a student. Returns False if the identity already exists."""

        raise NotImplementedError

    def delete(self, *, student_id: str, class_id: int) -> bool:
        raise NotImplementedError
