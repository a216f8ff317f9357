from __future__ import annotations

import logging
from typing import Sequence

from ..core.exceptions import NotFoundError
from ..lessons.repository import LessonRepository
from .model import AttendanceEntry, AttendanceRow
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Dashboard reads and manual presence toggles."""

    def __init__(self, attendance: AttendanceRepository, lessons: LessonRepository):
        self._attendance = attendance
        self._lessons = lessons

    def list_attendance(self, lesson_id: int) -> Sequence[AttendanceRow]:
        lesson = self._lessons.get_by_id(int(lesson_id))
        if not lesson:
            raise NotFoundError("Lesson not found")
        return self._attendance.list_for_lesson(lesson_id=lesson.lesson_id, class_id=lesson.class_id)

    def set_presence(self, *, lesson_id: int, class_id: int, student_id: str, is_present: bool) -> AttendanceEntry:
        updated = self._attendance.set_presence(
            lesson_id=int(lesson_id),
            class_id=int(class_id),
            student_id=student_id,
            is_present=bool(is_present),
        )
        if not updated:
            raise NotFoundError("Attendance record not found")

        logger.info(
            "Lesson %s: student %s manually marked %s",
            lesson_id, student_id, "present" if is_present else "absent",
        )
        return AttendanceEntry(
            lesson_id=int(lesson_id),
            student_id=student_id,
            class_id=int(class_id),
            is_present=bool(is_present),
        )
