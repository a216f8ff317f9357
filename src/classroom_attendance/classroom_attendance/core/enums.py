from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Machine-readable error kinds returned in JSON error bodies."""

    VALIDATION = "ValidationError"
    NOT_FOUND = "NotFound"
    METHOD_NOT_ALLOWED = "MethodNotAllowed"
    INVALID_TOKEN = "InvalidToken"
    STUDENT_NOT_ENROLLED = "StudentNotEnrolled"
    FORBIDDEN = "Forbidden"
    DUPLICATE_ORIGIN = "DuplicateOrigin"
    STORAGE = "StorageError"
    INTERNAL = "InternalError"


class AccessPolicy(str, Enum):
    """Who may call an endpoint."""

    LOCAL_ONLY = "local_only"
    LAN = "lan"
