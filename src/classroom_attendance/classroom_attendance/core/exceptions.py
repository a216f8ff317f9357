from .enums import ErrorKind


class DomainError(Exception):
    """Base exception for business rule violations."""

    kind = ErrorKind.INTERNAL
    status_code = 500


class ValidationError(DomainError):
    """Raised when input data is missing or invalid."""

    kind = ErrorKind.VALIDATION
    status_code = 400


class NotFoundError(DomainError):
    """Raised when a referenced class, student, lesson or token is absent."""

    kind = ErrorKind.NOT_FOUND
    status_code = 404


class InvalidTokenError(NotFoundError):
    """Raised when the presented token is not the live token of the lesson."""

    kind = ErrorKind.INVALID_TOKEN


class StudentNotEnrolledError(NotFoundError):
    """Raised when no attendance row exists for the student in the lesson."""

    kind = ErrorKind.STUDENT_NOT_ENROLLED


class ForbiddenError(DomainError):
    """Raised when the access guard rejects a request."""

    kind = ErrorKind.FORBIDDEN
    status_code = 403


class DuplicateOriginError(ForbiddenError):
    """Raised when a device already checked someone in for the lesson."""

    kind = ErrorKind.DUPLICATE_ORIGIN


class StorageError(DomainError):
    """Raised when the underlying store fails."""

    kind = ErrorKind.STORAGE
    status_code = 500
