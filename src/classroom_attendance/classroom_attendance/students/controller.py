from __future__ import annotations

from flask import Flask

from ..common.access_guard import local_only
from ..common.web import json_body, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/classes/<int:class_id>/students", methods=["GET"], endpoint="list_students")
    @local_only
    def list_students(class_id: int):
        students = container.student_service.list_students(class_id)
        return ok(students=[s.to_dict() for s in students])

    @app.route("/classes/<int:class_id>/students", methods=["POST"], endpoint="add_student")
    @local_only
    def add_student(class_id: int):
        data = json_body()
        student = container.student_service.add_student(
            class_id=class_id,
            student_id=data.get("studentId"),
            first_name=data.get("firstName"),
            last_name=data.get("lastName"),
        )
        return ok(201, student=student.to_dict())

    @app.route("/students/<student_id>/<int:class_id>", methods=["DELETE"], endpoint="remove_student")
    @local_only
    def remove_student(student_id: str, class_id: int):
        container.student_service.remove_student(student_id=student_id, class_id=class_id)
        return ok()
