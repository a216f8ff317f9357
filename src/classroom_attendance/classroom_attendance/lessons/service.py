from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from ..classes.repository import ClassRepository
from ..common.datetime_utils import parse_lesson_date
from ..core.exceptions import NotFoundError
from .model import Lesson
from .repository import LessonRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CreatedLesson:
    lesson: Lesson
    seeded: int


class LessonService:
    def __init__(self, lessons: LessonRepository, classes: ClassRepository):
        self._lessons = lessons
        self._classes = classes

    def list_lessons(self, class_id: int) -> Sequence[Lesson]:
        if not self._classes.get_by_id(int(class_id)):
            raise NotFoundError("Class not found")
        return self._lessons.list_for_class(int(class_id))

    def create_lesson(self, *, class_id: int, lesson_date: str) -> CreatedLesson:
        lesson_date = parse_lesson_date(lesson_date)
        if not self._classes.get_by_id(int(class_id)):
            raise NotFoundError("Class not found")

        lesson_id, seeded = self._lessons.create_seeded(class_id=int(class_id), lesson_date=lesson_date)
        logger.info("Created lesson %s for class %s (%d attendance rows seeded)", lesson_id, class_id, seeded)
        return CreatedLesson(
            lesson=Lesson(lesson_id=lesson_id, class_id=int(class_id), lesson_date=lesson_date),
            seeded=seeded,
        )

    def delete_lesson(self, lesson_id: int) -> None:
        if not self._lessons.delete(lesson_id=int(lesson_id)):
            raise NotFoundError("Lesson not found")
        logger.info("Deleted lesson %s", lesson_id)
