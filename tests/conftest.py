from __future__ import annotations

import sqlite3
from datetime import datetime

import pytest

from src.classroom_attendance.classroom_attendance.container import build_container
from src.classroom_attendance.classroom_attendance.database.bootstrap import apply_schema
from src.classroom_attendance.classroom_attendance.main import create_app

LAN_ADDRESS = "192.168.1.10"


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 1, 9, 0, 0)


@pytest.fixture
def db_config(tmp_path) -> dict:
    config = {"path": str(tmp_path / "classes.db"), "timeout": 10.0}
    apply_schema(config)
    return config


@pytest.fixture
def container(db_config):
    return build_container(db_config=db_config, advertised_host=LAN_ADDRESS)


@pytest.fixture
def app(db_config):
    return create_app(db_config=db_config, settings_module="config.testing")


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def count_rows(db_config):
    def _count(table: str, where: str = "1=1", params: tuple = ()) -> int:
        conn = sqlite3.connect(db_config["path"])
        try:
            return conn.execute(f"SELECT COUNT(*) FROM {table} WHERE {where}", params).fetchone()[0]
        finally:
            conn.close()

    return _count


@pytest.fixture
def classroom(container):
    """Class "C1" with students S1 and S2 and no lessons."""

    created = container.class_service.create_class("C1")
    for student_id, first, last in [("S1", "Ada", "Lovelace"), ("S2", "Alan", "Turing")]:
        container.student_service.add_student(
            class_id=created.class_id, student_id=student_id, first_name=first, last_name=last
        )
    return created
