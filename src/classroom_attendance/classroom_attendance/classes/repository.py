from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Classroom


class ClassRepository(Protocol):
    def list_all(self) -> Sequence[Classroom]:
        """All classes with their student counts."""

        raise NotImplementedError

    def get_by_id(self, class_id: int) -> Optional[Classroom]:
        raise NotImplementedError

    def create(self, *, name: str) -> int:
        raise NotImplementedError

    def rename(self, *, class_id: int, name: str) -> bool:
        raise NotImplementedError

    def delete(self, *, class_id: int) -> bool:
        """Delete a class; students, lessons and their dependents cascade."""

        raise NotImplementedError
