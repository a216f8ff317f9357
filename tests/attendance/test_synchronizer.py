from __future__ import annotations

import pytest

from src.classroom_attendance.classroom_attendance.core.exceptions import NotFoundError


def _lesson(container, classroom, date="2026-02-01T09:00"):
    return container.lesson_service.create_lesson(class_id=classroom.class_id, lesson_date=date).lesson


def test_lesson_creation_seeds_absent_rows(container, classroom):
    created = container.lesson_service.create_lesson(class_id=classroom.class_id, lesson_date="2026-02-01T09:00")

    rows = container.attendance_service.list_attendance(created.lesson.lesson_id)

    assert created.seeded == 2
    assert [(r.student_id, r.is_present) for r in rows] == [("S1", False), ("S2", False)]


def test_synchronize_is_idempotent(container, classroom):
    lesson = _lesson(container, classroom)

    assert container.attendance_synchronizer.synchronize(lesson.lesson_id) == 0
    container.student_service.add_student(
        class_id=classroom.class_id, student_id="S3", first_name="Grace", last_name="Hopper"
    )
    assert container.attendance_synchronizer.synchronize(lesson.lesson_id) == 1
    assert container.attendance_synchronizer.synchronize(lesson.lesson_id) == 0


def test_synchronize_keeps_existing_presence(container, classroom):
    lesson = _lesson(container, classroom)
    container.attendance_service.set_presence(
        lesson_id=lesson.lesson_id, class_id=classroom.class_id, student_id="S1", is_present=True
    )

    container.attendance_synchronizer.synchronize(lesson.lesson_id)

    entry = container.attendance_repo.get(lesson_id=lesson.lesson_id, class_id=classroom.class_id, student_id="S1")
    assert entry.is_present is True


def test_synchronize_only_touches_the_lesson_class(container, classroom, count_rows):
    other = container.class_service.create_class("C2")
    container.student_service.add_student(class_id=other.class_id, student_id="S1", first_name="Ada", last_name="Other")
    lesson = _lesson(container, classroom)

    container.attendance_synchronizer.synchronize(lesson.lesson_id)

    assert count_rows("attendance", "lesson_id=?", (lesson.lesson_id,)) == 2
    assert count_rows("attendance", "class_id=?", (other.class_id,)) == 0


def test_synchronize_unknown_lesson_is_not_found(container):
    with pytest.raises(NotFoundError):
        container.attendance_synchronizer.synchronize(404)


def test_unsynchronized_student_is_listed_absent(container, classroom):
    lesson = _lesson(container, classroom)
    container.student_service.add_student(
        class_id=classroom.class_id, student_id="S3", first_name="Grace", last_name="Hopper"
    )

    rows = {r.student_id: r.is_present for r in container.attendance_service.list_attendance(lesson.lesson_id)}

    assert rows == {"S1": False, "S2": False, "S3": False}


def test_manual_toggle_sets_either_value(container, classroom):
    lesson = _lesson(container, classroom)
    svc = container.attendance_service

    svc.set_presence(lesson_id=lesson.lesson_id, class_id=classroom.class_id, student_id="S2", is_present=True)
    svc.set_presence(lesson_id=lesson.lesson_id, class_id=classroom.class_id, student_id="S2", is_present=False)

    entry = container.attendance_repo.get(lesson_id=lesson.lesson_id, class_id=classroom.class_id, student_id="S2")
    assert entry.is_present is False


def test_manual_toggle_of_missing_row_is_not_found(container, classroom):
    lesson = _lesson(container, classroom)

    with pytest.raises(NotFoundError):
        container.attendance_service.set_presence(
            lesson_id=lesson.lesson_id, class_id=classroom.class_id, student_id="NOPE", is_present=True
        )
