from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class LessonToken:
    """The single live check-in secret of a lesson."""

    lesson_id: int
    token: str
    created_at: datetime


@dataclass(frozen=True)
class IssuedToken:
    """What the dashboard needs to render the check-in QR code."""

    token: str
    created_at: datetime
    lesson_id: int
    class_id: int
    address: str
    checkin_url: str

    def to_dict(self) -> dict:
        return {
            "token": self.token,
            "createdAt": self.created_at.isoformat(timespec="seconds"),
            "lessonId": self.lesson_id,
            "classId": self.class_id,
            "address": self.address,
            "checkinUrl": self.checkin_url,
        }
