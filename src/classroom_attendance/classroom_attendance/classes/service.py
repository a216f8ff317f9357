from __future__ import annotations

import logging
from typing import Sequence

from ..common.validators import require_non_empty
from ..core.exceptions import NotFoundError
from .model import Classroom
from .repository import ClassRepository

logger = logging.getLogger(__name__)


class ClassService:
    def __init__(self, classes: ClassRepository):
        self._classes = classes

    def list_classes(self) -> Sequence[Classroom]:
        return self._classes.list_all()

    def get_class(self, class_id: int) -> Classroom:
        found = self._classes.get_by_id(int(class_id))
        if not found:
            raise NotFoundError("Class not found")
        return found

    def create_class(self, name: str) -> Classroom:
        name = require_non_empty(name, "Class name")
        class_id = self._classes.create(name=name)
        logger.info("Created class %s (%s)", class_id, name)
        return Classroom(class_id=class_id, name=name)

    def rename_class(self, class_id: int, name: str) -> Classroom:
        name = require_non_empty(name, "Class name")
        if not self._classes.rename(class_id=int(class_id), name=name):
            raise NotFoundError("Class not found")
        return self.get_class(class_id)

    def delete_class(self, class_id: int) -> None:
        if not self._classes.delete(class_id=int(class_id)):
            raise NotFoundError("Class not found")
        logger.info("Deleted class %s with its students and lessons", class_id)
