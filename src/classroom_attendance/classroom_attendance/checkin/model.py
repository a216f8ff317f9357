from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CheckinAck:
    """Acknowledgement of a counted check-in. Reveals nothing about others."""

    lesson_id: int
    student_id: str

    def to_dict(self) -> dict:
        return {"success": True}
