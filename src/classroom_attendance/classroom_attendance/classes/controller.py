from __future__ import annotations

from flask import Flask

from ..common.access_guard import local_only
from ..common.web import json_body, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/classes", methods=["GET"], endpoint="list_classes")
    @local_only
    def list_classes():
        classes = container.class_service.list_classes()
        return ok(classes=[c.to_dict() for c in classes])

    @app.route("/classes", methods=["POST"], endpoint="create_class")
    @local_only
    def create_class():
        created = container.class_service.create_class(json_body().get("name"))
        return ok(201, **{"class": created.to_dict()})

    @app.route("/classes/<int:class_id>", methods=["PATCH"], endpoint="rename_class")
    @local_only
    def rename_class(class_id: int):
        renamed = container.class_service.rename_class(class_id, json_body().get("name"))
        return ok(**{"class": renamed.to_dict()})

    @app.route("/classes/<int:class_id>", methods=["DELETE"], endpoint="delete_class")
    @local_only
    def delete_class(class_id: int):
        container.class_service.delete_class(class_id)
        return ok()
