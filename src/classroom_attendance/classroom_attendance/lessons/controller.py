from __future__ import annotations

from flask import Flask

from ..common.access_guard import local_only
from ..common.web import json_body, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/classes/<int:class_id>/lessons", methods=["GET"], endpoint="list_lessons")
    @local_only
    def list_lessons(class_id: int):
        lessons = container.lesson_service.list_lessons(class_id)
        return ok(lessons=[lesson.to_dict() for lesson in lessons])

    @app.route("/classes/<int:class_id>/lessons", methods=["POST"], endpoint="create_lesson")
    @local_only
    def create_lesson(class_id: int):
        created = container.lesson_service.create_lesson(class_id=class_id, lesson_date=json_body().get("date"))
        return ok(201, lesson=created.lesson.to_dict(), seeded=created.seeded)

    @app.route("/lessons/<int:lesson_id>", methods=["DELETE"], endpoint="delete_lesson")
    @local_only
    def delete_lesson(lesson_id: int):
        container.lesson_service.delete_lesson(lesson_id)
        return ok()
