from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Optional
from urllib.parse import urlencode

from ..common.datetime_utils import now_local
from ..core.constants import DEFAULT_PORT, DEFAULT_TOKEN_LENGTH
from ..core.exceptions import NotFoundError
from ..lessons.model import Lesson
from ..lessons.repository import LessonRepository
from ..network.resolver import resolve_lan_address
from .generator import generate_token
from .model import IssuedToken, LessonToken
from .repository import TokenRepository

logger = logging.getLogger(__name__)


class TokenService:
    """Mint, rotate and revoke the single live check-in token of a lesson.

    Tokens never expire on their own; they live until rotated or revoked.
    """

    def __init__(
        self,
        tokens: TokenRepository,
        lessons: LessonRepository,
        *,
        port: int = DEFAULT_PORT,
        token_length: int = DEFAULT_TOKEN_LENGTH,
        token_factory: Optional[Callable[[int], str]] = None,
        address_resolver: Optional[Callable[[], str]] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._tokens = tokens
        self._lessons = lessons
        self._port = int(port)
        self._token_length = int(token_length)
        self._token_factory = token_factory or generate_token
        self._address_resolver = address_resolver or resolve_lan_address
        self._clock = clock or now_local

    def _require_lesson(self, lesson_id: int) -> Lesson:
        lesson = self._lessons.get_by_id(int(lesson_id))
        if not lesson:
            raise NotFoundError("Lesson not found")
        return lesson

    def checkin_url(self, *, address: str, lesson_id: int, token: str) -> str:
        query = urlencode({"lessonId": lesson_id, "token": token})
        return f"http://{address}:{self._port}/checkin?{query}"

    def _issued(self, lesson: Lesson, current: LessonToken) -> IssuedToken:
        address = self._address_resolver()
        return IssuedToken(
            token=current.token,
            created_at=current.created_at,
            lesson_id=lesson.lesson_id,
            class_id=lesson.class_id,
            address=address,
            checkin_url=self.checkin_url(address=address, lesson_id=lesson.lesson_id, token=current.token),
        )

    def issue_token(self, lesson_id: int) -> IssuedToken:
        lesson = self._require_lesson(lesson_id)

        current = LessonToken(
            lesson_id=lesson.lesson_id,
            token=self._token_factory(self._token_length),
            created_at=self._clock(),
        )
        self._tokens.upsert(lesson_id=current.lesson_id, token=current.token, created_at=current.created_at)
        logger.info("Issued check-in token for lesson %s", lesson.lesson_id)
        return self._issued(lesson, current)

    def current_token(self, lesson_id: int) -> IssuedToken:
        lesson = self._require_lesson(lesson_id)
        current = self._tokens.get(lesson.lesson_id)
        if not current:
            raise NotFoundError("No active token for this lesson")
        return self._issued(lesson, current)

    def revoke_token(self, lesson_id: int) -> bool:
        lesson = self._require_lesson(lesson_id)
        revoked = self._tokens.delete(lesson.lesson_id)
        if revoked:
            logger.info("Revoked check-in token for lesson %s", lesson.lesson_id)
        return revoked
