from __future__ import annotations

import hmac
import logging
from datetime import datetime
from typing import Callable, Optional

from ..common.datetime_utils import now_local
from ..common.validators import require_id, require_non_empty
from ..core.exceptions import (
    DuplicateOriginError,
    InvalidTokenError,
    StudentNotEnrolledError,
    ValidationError,
)
from .model import CheckinAck
from .repository import CheckinRepository

logger = logging.getLogger(__name__)


class RegistrationVerifier:
    """Student self-check-in.

    One check-in runs as one transaction:

    1. the presented token must equal the lesson's live token;
    2. the lesson's class is resolved;
    3. a device (origin address) already recorded for the lesson is refused;
    4. the origin is recorded, the unique (lesson, origin) constraint
       deciding between concurrent requests;
    5. the student's attendance row is marked present.

    Any failure rolls back every step, so a rejected student never leaves
    the device locked out.
    """

    def __init__(self, checkins: CheckinRepository, *, clock: Optional[Callable[[], datetime]] = None):
        self._checkins = checkins
        self._clock = clock or now_local

    @staticmethod
    def normalize_token(token: str) -> str:
        return token.strip().upper()

    def register_attendance(self, *, token, lesson_id, student_id, origin: Optional[str]) -> CheckinAck:
        presented = self.normalize_token(require_non_empty(token, "Token"))
        lesson_id = require_id(lesson_id, "Lesson id")
        student_id = require_non_empty(student_id, "Student id")
        if not origin:
            raise ValidationError("Request origin is unknown")

        try:
            with self._checkins.transaction() as tx:
                live = tx.get_token(lesson_id)
                if live is None or not hmac.compare_digest(live.encode("utf-8"), presented.encode("utf-8")):
                    raise InvalidTokenError("Invalid or expired token for this lesson")

                class_id = tx.get_lesson_class(lesson_id)
                if class_id is None:
                    raise InvalidTokenError("Invalid or expired token for this lesson")

                if tx.origin_registered(lesson_id=lesson_id, origin=origin):
                    raise DuplicateOriginError("This device has already registered attendance for this lesson")

                tx.record_origin(lesson_id=lesson_id, origin=origin, registered_at=self._clock())

                if not tx.mark_present(lesson_id=lesson_id, class_id=class_id, student_id=student_id):
                    raise StudentNotEnrolledError("Student is not enrolled in this lesson's class")
        except (InvalidTokenError, DuplicateOriginError, StudentNotEnrolledError) as e:
            logger.warning(
                "Check-in rejected (%s): lesson=%s student=%s origin=%s",
                e.kind.value, lesson_id, student_id, origin,
            )
            raise

        logger.info("Check-in accepted: lesson=%s student=%s origin=%s", lesson_id, student_id, origin)
        return CheckinAck(lesson_id=lesson_id, student_id=student_id)
