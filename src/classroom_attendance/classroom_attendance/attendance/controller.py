from __future__ import annotations

from flask import Flask

from ..common.access_guard import local_only
from ..common.validators import require_bool
from ..common.web import json_body, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/lessons/<int:lesson_id>/attendance", methods=["GET"], endpoint="lesson_attendance")
    @local_only
    def lesson_attendance(lesson_id: int):
        rows = container.attendance_service.list_attendance(lesson_id)
        return ok(lessonId=lesson_id, attendance=[r.to_dict() for r in rows])

    @app.route("/lessons/<int:lesson_id>/attendance/sync", methods=["POST"], endpoint="sync_attendance")
    @local_only
    def sync_attendance(lesson_id: int):
        added = container.attendance_synchronizer.synchronize(lesson_id)
        return ok(lessonId=lesson_id, added=added)

    @app.route(
        "/attendance/<int:lesson_id>/<int:class_id>/<student_id>",
        methods=["PATCH"],
        endpoint="set_presence",
    )
    @local_only
    def set_presence(lesson_id: int, class_id: int, student_id: str):
        is_present = require_bool(json_body().get("isPresent"), "isPresent")
        entry = container.attendance_service.set_presence(
            lesson_id=lesson_id,
            class_id=class_id,
            student_id=student_id,
            is_present=is_present,
        )
        return ok(attendance=entry.to_dict())
