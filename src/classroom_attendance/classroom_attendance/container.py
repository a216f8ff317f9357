from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from typing import Optional

from .attendance.service import AttendanceService
from .attendance.sqlite_attendance_repository import SQLiteAttendanceRepository
from .attendance.synchronizer import AttendanceSynchronizer
from .checkin.service import RegistrationVerifier
from .checkin.sqlite_checkin_repository import SQLiteCheckinRepository
from .classes.service import ClassService
from .classes.sqlite_class_repository import SQLiteClassRepository
from .core.constants import DEFAULT_PORT, DEFAULT_TOKEN_LENGTH
from .database.connection import DatabaseConnection, DBConfig
from .lessons.service import LessonService
from .lessons.sqlite_lesson_repository import SQLiteLessonRepository
from .network.resolver import resolve_lan_address
from .students.service import StudentService
from .students.sqlite_student_repository import SQLiteStudentRepository
from .tokens.service import TokenService
from .tokens.sqlite_token_repository import SQLiteTokenRepository


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    classes_repo: SQLiteClassRepository
    students_repo: SQLiteStudentRepository
    lessons_repo: SQLiteLessonRepository
    attendance_repo: SQLiteAttendanceRepository
    tokens_repo: SQLiteTokenRepository
    checkins_repo: SQLiteCheckinRepository

    class_service: ClassService
    student_service: StudentService
    lesson_service: LessonService
    attendance_service: AttendanceService
    attendance_synchronizer: AttendanceSynchronizer
    token_service: TokenService
    registration_verifier: RegistrationVerifier


def build_container(
    *,
    db_config: dict,
    port: int = DEFAULT_PORT,
    token_length: int = DEFAULT_TOKEN_LENGTH,
    advertised_host: Optional[str] = None,
) -> Container:
    """Wire repositories and services around one explicitly passed store."""

    conn = DatabaseConnection(DBConfig.from_dict(db_config))

    classes_repo = SQLiteClassRepository(conn)
    students_repo = SQLiteStudentRepository(conn)
    lessons_repo = SQLiteLessonRepository(conn)
    attendance_repo = SQLiteAttendanceRepository(conn)
    tokens_repo = SQLiteTokenRepository(conn)
    checkins_repo = SQLiteCheckinRepository(conn)

    class_service = ClassService(classes_repo)
    student_service = StudentService(students_repo, classes_repo)
    lesson_service = LessonService(lessons_repo, classes_repo)
    attendance_service = AttendanceService(attendance_repo, lessons_repo)
    attendance_synchronizer = AttendanceSynchronizer(attendance_repo, lessons_repo)
    token_service = TokenService(
        tokens_repo,
        lessons_repo,
        port=port,
        token_length=token_length,
        address_resolver=partial(resolve_lan_address, advertised_host),
    )
    registration_verifier = RegistrationVerifier(checkins_repo)

    return Container(
        conn=conn,
        classes_repo=classes_repo,
        students_repo=students_repo,
        lessons_repo=lessons_repo,
        attendance_repo=attendance_repo,
        tokens_repo=tokens_repo,
        checkins_repo=checkins_repo,
        class_service=class_service,
        student_service=student_service,
        lesson_service=lesson_service,
        attendance_service=attendance_service,
        attendance_synchronizer=attendance_synchronizer,
        token_service=token_service,
        registration_verifier=registration_verifier,
    )
