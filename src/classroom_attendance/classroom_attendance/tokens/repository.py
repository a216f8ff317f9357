from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol

from .model import LessonToken


class TokenRepository(Protocol):
    def get(self, lesson_id: int) -> Optional[LessonToken]:
        raise NotImplementedError

    def upsert(self, *, lesson_id: int, token: str, created_at: datetime) -> None:
        """Create or atomically replace the token of a lesson."""

        raise NotImplementedError

    def delete(self, lesson_id: int) -> bool:
        raise NotImplementedError
