from __future__ import annotations

import threading
from datetime import datetime

import pytest

from src.classroom_attendance.classroom_attendance.core.exceptions import (
    DuplicateOriginError,
    InvalidTokenError,
    StudentNotEnrolledError,
)


def _presence(container, lesson_id: int, class_id: int, student_id: str) -> bool:
    entry = container.attendance_repo.get(lesson_id=lesson_id, class_id=class_id, student_id=student_id)
    assert entry is not None
    return entry.is_present


def test_classroom_scenario(container, classroom, count_rows):
    created = container.lesson_service.create_lesson(class_id=classroom.class_id, lesson_date="2026-02-01T09:00")
    lesson_id = created.lesson.lesson_id
    assert created.seeded == 2
    assert _presence(container, lesson_id, classroom.class_id, "S1") is False
    assert _presence(container, lesson_id, classroom.class_id, "S2") is False

    t1 = container.token_service.issue_token(lesson_id).token
    verifier = container.registration_verifier

    verifier.register_attendance(token=t1, lesson_id=lesson_id, student_id="S1", origin="192.168.1.21")
    assert _presence(container, lesson_id, classroom.class_id, "S1") is True

    with pytest.raises(DuplicateOriginError):
        verifier.register_attendance(token=t1, lesson_id=lesson_id, student_id="S2", origin="192.168.1.21")
    assert _presence(container, lesson_id, classroom.class_id, "S2") is False

    container.student_service.add_student(
        class_id=classroom.class_id, student_id="S3", first_name="Grace", last_name="Hopper"
    )
    assert container.attendance_synchronizer.synchronize(lesson_id) == 1
    assert _presence(container, lesson_id, classroom.class_id, "S3") is False
    assert count_rows("attendance", "lesson_id=?", (lesson_id,)) == 3


def test_rotated_token_no_longer_verifies(container, classroom):
    lesson_id = container.lesson_service.create_lesson(class_id=classroom.class_id, lesson_date="2026-02-01").lesson.lesson_id
    old = container.token_service.issue_token(lesson_id).token
    new = container.token_service.issue_token(lesson_id).token
    assert old != new

    with pytest.raises(InvalidTokenError):
        container.registration_verifier.register_attendance(
            token=old, lesson_id=lesson_id, student_id="S1", origin="192.168.1.21"
        )

    container.registration_verifier.register_attendance(
        token=new, lesson_id=lesson_id, student_id="S1", origin="192.168.1.21"
    )


def test_token_of_another_lesson_is_invalid(container, classroom):
    first = container.lesson_service.create_lesson(class_id=classroom.class_id, lesson_date="2026-02-01").lesson
    second = container.lesson_service.create_lesson(class_id=classroom.class_id, lesson_date="2026-02-02").lesson
    token = container.token_service.issue_token(first.lesson_id).token
    container.token_service.issue_token(second.lesson_id)

    with pytest.raises(InvalidTokenError):
        container.registration_verifier.register_attendance(
            token=token, lesson_id=second.lesson_id, student_id="S1", origin="192.168.1.21"
        )


def test_revoked_token_no_longer_verifies(container, classroom):
    lesson_id = container.lesson_service.create_lesson(class_id=classroom.class_id, lesson_date="2026-02-01").lesson.lesson_id
    token = container.token_service.issue_token(lesson_id).token
    assert container.token_service.revoke_token(lesson_id) is True

    with pytest.raises(InvalidTokenError):
        container.registration_verifier.register_attendance(
            token=token, lesson_id=lesson_id, student_id="S1", origin="192.168.1.21"
        )


def test_unsynchronized_student_is_not_enrolled_and_device_stays_usable(container, classroom, count_rows):
    lesson_id = container.lesson_service.create_lesson(class_id=classroom.class_id, lesson_date="2026-02-01").lesson.lesson_id
    token = container.token_service.issue_token(lesson_id).token
    container.student_service.add_student(
        class_id=classroom.class_id, student_id="S3", first_name="Grace", last_name="Hopper"
    )

    with pytest.raises(StudentNotEnrolledError):
        container.registration_verifier.register_attendance(
            token=token, lesson_id=lesson_id, student_id="S3", origin="192.168.1.30"
        )
    assert count_rows("ip_registrations") == 0

    container.attendance_synchronizer.synchronize(lesson_id)
    container.registration_verifier.register_attendance(
        token=token, lesson_id=lesson_id, student_id="S3", origin="192.168.1.30"
    )
    assert _presence(container, lesson_id, classroom.class_id, "S3") is True
    assert count_rows("ip_registrations") == 1


def test_unique_constraint_rejects_second_origin_insert(container, classroom):
    lesson_id = container.lesson_service.create_lesson(class_id=classroom.class_id, lesson_date="2026-02-01").lesson.lesson_id
    now = datetime(2026, 2, 1, 9, 0)

    with pytest.raises(DuplicateOriginError):
        with container.checkins_repo.transaction() as tx:
            tx.record_origin(lesson_id=lesson_id, origin="192.168.1.40", registered_at=now)
            tx.record_origin(lesson_id=lesson_id, origin="192.168.1.40", registered_at=now)


def test_concurrent_checkins_from_one_device_count_once(container, classroom, count_rows):
    student_ids = [f"R{i}" for i in range(8)]
    for sid in student_ids:
        container.student_service.add_student(
            class_id=classroom.class_id, student_id=sid, first_name="Race", last_name=sid
        )
    lesson_id = container.lesson_service.create_lesson(class_id=classroom.class_id, lesson_date="2026-02-01").lesson.lesson_id
    token = container.token_service.issue_token(lesson_id).token

    barrier = threading.Barrier(len(student_ids))
    outcomes: list[str] = []
    lock = threading.Lock()

    def attempt(student_id: str) -> None:
        barrier.wait()
        try:
            container.registration_verifier.register_attendance(
                token=token, lesson_id=lesson_id, student_id=student_id, origin="192.168.1.77"
            )
            outcome = "ok"
        except DuplicateOriginError:
            outcome = "duplicate"
        except Exception as e:
            outcome = f"error: {e!r}"
        with lock:
            outcomes.append(outcome)

    threads = [threading.Thread(target=attempt, args=(sid,)) for sid in student_ids]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=30)

    assert outcomes.count("ok") == 1
    assert outcomes.count("duplicate") == len(student_ids) - 1
    assert count_rows("ip_registrations", "lesson_id=?", (lesson_id,)) == 1
    assert count_rows("attendance", "lesson_id=? AND is_present=1", (lesson_id,)) == 1


def test_different_devices_each_register_once(container, classroom, count_rows):
    lesson_id = container.lesson_service.create_lesson(class_id=classroom.class_id, lesson_date="2026-02-01").lesson.lesson_id
    token = container.token_service.issue_token(lesson_id).token

    container.registration_verifier.register_attendance(token=token, lesson_id=lesson_id, student_id="S1", origin="192.168.1.21")
    container.registration_verifier.register_attendance(token=token, lesson_id=lesson_id, student_id="S2", origin="192.168.1.22")

    assert count_rows("attendance", "lesson_id=? AND is_present=1", (lesson_id,)) == 2
