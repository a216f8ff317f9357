from __future__ import annotations

from flask import Flask

from ..common.access_guard import local_only
from ..common.web import ok
from ..container import Container
from .qr import render_qr_png


def register(app: Flask, container: Container) -> None:
    @app.route("/lessons/<int:lesson_id>/token", methods=["POST"], endpoint="issue_token")
    @local_only
    def issue_token(lesson_id: int):
        issued = container.token_service.issue_token(lesson_id)
        return ok(201, **issued.to_dict())

    @app.route("/lessons/<int:lesson_id>/token", methods=["DELETE"], endpoint="revoke_token")
    @local_only
    def revoke_token(lesson_id: int):
        revoked = container.token_service.revoke_token(lesson_id)
        return ok(lessonId=lesson_id, revoked=revoked)

    @app.route("/lessons/<int:lesson_id>/token/qr", methods=["GET"], endpoint="token_qr")
    @local_only
    def token_qr(lesson_id: int):
        """PNG QR code of the check-in URL for the lesson's live token."""

        issued = container.token_service.current_token(lesson_id)
        png = render_qr_png(issued.checkin_url)
        return app.response_class(png, mimetype="image/png", headers={"Cache-Control": "no-store"})
