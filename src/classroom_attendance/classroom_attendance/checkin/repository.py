from __future__ import annotations

from datetime import datetime
from typing import ContextManager, Optional, Protocol


class CheckinTransaction(Protocol):
    """Store operations of one check-in, all inside a single transaction."""

    def get_token(self, lesson_id: int) -> Optional[str]:
        raise NotImplementedError

    def get_lesson_class(self, lesson_id: int) -> Optional[int]:
        raise NotImplementedError

    def origin_registered(self, *, lesson_id: int, origin: str) -> bool:
        raise NotImplementedError

    def record_origin(self, *, lesson_id: int, origin: str, registered_at: datetime) -> None:
        """Insert the (lesson, origin) pair.

        Raises DuplicateOriginError when the pair already exists; the
        uniqueness constraint is the authority, not origin_registered().
        """

        raise NotImplementedError

    def mark_present(self, *, lesson_id: int, class_id: int, student_id: str) -> bool:
        raise NotImplementedError


class CheckinRepository(Protocol):
    def transaction(self) -> ContextManager[CheckinTransaction]:
        """Open a serialized transaction; commit on clean exit, roll back on error."""

        raise NotImplementedError
