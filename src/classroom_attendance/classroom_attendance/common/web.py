from __future__ import annotations

import logging
from typing import Any

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from ..core.enums import ErrorKind
from ..core.exceptions import DomainError, ValidationError

logger = logging.getLogger(__name__)

# Other 4xx (malformed body, unsupported media type) report as ValidationError.
_HTTP_KINDS = {
    404: ErrorKind.NOT_FOUND,
    405: ErrorKind.METHOD_NOT_ALLOWED,
}


def ok(status: int = 200, **payload: Any):
    return jsonify({"success": True, **payload}), status


def error_body(kind: ErrorKind, message: str) -> dict:
    return {"success": False, "kind": kind.value, "message": message}


def json_body() -> dict:
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        return jsonify(error_body(e.kind, str(e))), e.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        kind = _HTTP_KINDS.get(e.code, ErrorKind.VALIDATION)
        if e.code and e.code >= 500:
            kind = ErrorKind.INTERNAL
        headers = {}
        if getattr(e, "valid_methods", None):
            headers["Allow"] = ", ".join(e.valid_methods)
        return jsonify(error_body(kind, e.description or e.name)), e.code, headers

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        return jsonify(error_body(ErrorKind.INTERNAL, "Internal server error")), 500
