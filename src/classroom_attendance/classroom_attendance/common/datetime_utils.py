from __future__ import annotations

from datetime import datetime

from ..core.exceptions import ValidationError


def parse_lesson_date(value: str) -> str:
    """Validate an ISO-8601 date or date-time and return it trimmed.

    The stored text keeps the caller's precision (``2025-03-01`` or
    ``2025-03-01T09:00``) so lessons sort chronologically as strings.
    """

    text = (value or "").strip()
    if not text:
        raise ValidationError("Lesson date is required")
    try:
        datetime.fromisoformat(text)
    except ValueError:
        raise ValidationError(f"Invalid lesson date: {text!r}")
    return text


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
