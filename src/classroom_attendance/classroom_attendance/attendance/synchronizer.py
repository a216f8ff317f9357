from __future__ import annotations

import logging

from ..core.exceptions import NotFoundError
from ..lessons.repository import LessonRepository
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceSynchronizer:
    """Reconcile attendance rows of a lesson with its class membership.

    Idempotent: a second run without membership changes adds nothing.
    """

    def __init__(self, attendance: AttendanceRepository, lessons: LessonRepository):
        self._attendance = attendance
        self._lessons = lessons

    def synchronize(self, lesson_id: int) -> int:
        lesson = self._lessons.get_by_id(int(lesson_id))
        if not lesson:
            raise NotFoundError("Lesson not found")

        added = self._attendance.insert_missing(lesson_id=lesson.lesson_id, class_id=lesson.class_id)
        if added:
            logger.info("Synchronized lesson %s: %d attendance rows added", lesson.lesson_id, added)
        return added
