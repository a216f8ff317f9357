from __future__ import annotations

import logging
from typing import Sequence

from ..classes.repository import ClassRepository
from ..common.validators import require_non_empty
from ..core.exceptions import NotFoundError, ValidationError
from .model import Student
from .repository import StudentRepository

logger = logging.getLogger(__name__)


class StudentService:
    """Class membership. Adding a student does not touch existing lessons;
    their attendance rows appear on the next synchronization."""

    def __init__(self, students: StudentRepository, classes: ClassRepository):
        self._students = students
        self._classes = classes

    def _require_class(self, class_id: int) -> None:
        if not self._classes.get_by_id(int(class_id)):
            raise NotFoundError("Class not found")

    def list_students(self, class_id: int) -> Sequence[Student]:
        self._require_class(class_id)
        return self._students.list_for_class(int(class_id))

    def add_student(self, *, class_id: int, student_id: str, first_name: str, last_name: str) -> Student:
        student = Student(
            student_id=require_non_empty(student_id, "Student id"),
            first_name=require_non_empty(first_name, "First name"),
            last_name=require_non_empty(last_name, "Last name"),
            class_id=int(class_id),
        )
        self._require_class(class_id)
        if not self._students.create(student):
            raise ValidationError(f"Student {student.student_id} already exists in this class")
        logger.info("Added student %s to class %s", student.student_id, student.class_id)
        return student

    def remove_student(self, *, student_id: str, class_id: int) -> None:
        if not self._students.delete(student_id=student_id, class_id=int(class_id)):
            raise NotFoundError("Student not found")
        logger.info("Removed student %s from class %s", student_id, class_id)
