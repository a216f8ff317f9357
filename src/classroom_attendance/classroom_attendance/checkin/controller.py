from __future__ import annotations

from flask import Flask, jsonify, render_template, request

from ..common.access_guard import lan_open
from ..common.web import json_body
from ..container import Container
from ..core.exceptions import DomainError

_FORM_TYPES = {"application/x-www-form-urlencoded", "multipart/form-data"}


def register(app: Flask, container: Container) -> None:
    def _register(data):
        return container.registration_verifier.register_attendance(
            token=data.get("token") or request.args.get("token"),
            lesson_id=data.get("lessonId") or request.args.get("lessonId"),
            student_id=data.get("studentId"),
            origin=request.remote_addr,
        )

    def _render(status: int = 200, **context):
        context.setdefault("lesson_id", request.values.get("lessonId", ""))
        context.setdefault("token", request.values.get("token", ""))
        context.setdefault("student_id", request.form.get("studentId", ""))
        return render_template("checkin.html", **context), status

    @app.route("/checkin", methods=["GET"], endpoint="checkin_form")
    @lan_open
    def checkin_form():
        """Page opened by scanning the lesson QR code."""

        return _render()

    @app.route("/checkin", methods=["POST"], endpoint="checkin")
    @lan_open
    def checkin():
        """Student self-check-in, reachable from any device on the LAN.

        JSON callers get a JSON acknowledgement; the form page gets the page
        back with the outcome. ``token`` and ``lessonId`` may also come from
        the query string of the QR code URL.
        """

        if request.mimetype in _FORM_TYPES:
            try:
                _register(request.form)
            except DomainError as e:
                return _render(e.status_code, error=str(e))
            return _render(done=True)

        ack = _register(json_body())
        return jsonify(ack.to_dict())
