from __future__ import annotations

from typing import Any

from ..core.exceptions import ValidationError


def require_non_empty(value: Any, field_name: str) -> str:
    if value is None or not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_id(value: Any, field_name: str) -> int:
    """Accept an int or a numeric string (JSON bodies and URL segments)."""

    if isinstance(value, bool):
        raise ValidationError(f"{field_name} is not a valid id")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    if value is None or value == "":
        raise ValidationError(f"{field_name} is required")
    raise ValidationError(f"{field_name} is not a valid id")


def require_bool(value: Any, field_name: str) -> bool:
    # The dashboard historically sent 0/1 integers for presence.
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    raise ValidationError(f"{field_name} must be true or false")
