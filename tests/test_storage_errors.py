from __future__ import annotations

import sqlite3

import pytest

from src.classroom_attendance.classroom_attendance.container import build_container
from src.classroom_attendance.classroom_attendance.core.exceptions import StorageError

STUDENT_DEVICE = "192.168.1.50"


def _drop_attendance_table(db_config: dict) -> None:
    conn = sqlite3.connect(db_config["path"])
    try:
        conn.execute("DROP TABLE attendance")
        conn.commit()
    finally:
        conn.close()


@pytest.fixture
def live_lesson(container, classroom):
    created = container.lesson_service.create_lesson(class_id=classroom.class_id, lesson_date="2026-02-01")
    issued = container.token_service.issue_token(created.lesson.lesson_id)
    return issued


def test_unopenable_store_raises_storage_error(tmp_path):
    broken = build_container(db_config={"path": str(tmp_path / "missing" / "classes.db")})

    with pytest.raises(StorageError):
        broken.class_service.list_classes()


def test_driver_error_mid_checkin_rolls_back_registration(container, live_lesson, db_config, count_rows):
    _drop_attendance_table(db_config)

    with pytest.raises(StorageError):
        container.registration_verifier.register_attendance(
            token=live_lesson.token,
            lesson_id=live_lesson.lesson_id,
            student_id="S1",
            origin=STUDENT_DEVICE,
        )

    assert count_rows("ip_registrations") == 0

    # The device is not locked out: the retry reaches the store again instead of DuplicateOrigin.
    with pytest.raises(StorageError):
        container.registration_verifier.register_attendance(
            token=live_lesson.token,
            lesson_id=live_lesson.lesson_id,
            student_id="S1",
            origin=STUDENT_DEVICE,
        )


def test_storage_error_is_a_json_500(client, live_lesson, db_config, count_rows):
    _drop_attendance_table(db_config)

    resp = client.post(
        "/checkin",
        json={"token": live_lesson.token, "lessonId": live_lesson.lesson_id, "studentId": "S1"},
        environ_base={"REMOTE_ADDR": STUDENT_DEVICE},
    )

    assert resp.status_code == 500
    body = resp.get_json()
    assert body["success"] is False
    assert body["kind"] == "StorageError"
    assert count_rows("ip_registrations") == 0
