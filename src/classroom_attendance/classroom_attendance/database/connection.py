from __future__ import annotations

import sqlite3
from dataclasses import dataclass
from pathlib import Path

from ..core.constants import DEFAULT_DB_TIMEOUT_SECONDS


@dataclass(frozen=True)
class DBConfig:
    path: str
    timeout: float = DEFAULT_DB_TIMEOUT_SECONDS

    @classmethod
    def from_dict(cls, db_config: dict) -> "DBConfig":
        return cls(
            path=str(db_config["path"]),
            timeout=float(db_config.get("timeout", DEFAULT_DB_TIMEOUT_SECONDS)),
        )


def _dict_row(cur: sqlite3.Cursor, row: tuple) -> dict:
    return {col[0]: value for col, value in zip(cur.description, row)}


class DatabaseConnection:
    """DB connection factory for one SQLite file.

    Note: We create short-lived connections per operation; each one enables
    foreign keys so cascading deletes apply.
    """

    def __init__(self, config: DBConfig):
        self._config = config

    @property
    def config(self) -> DBConfig:
        return self._config

    def ensure_directory(self) -> None:
        if self._config.path != ":memory:":
            Path(self._config.path).parent.mkdir(parents=True, exist_ok=True)

    def connect(self, *, dictionary: bool = True) -> sqlite3.Connection:
        conn = sqlite3.connect(self._config.path, timeout=self._config.timeout)
        if dictionary:
            conn.row_factory = _dict_row
        conn.execute("PRAGMA foreign_keys = ON")
        return conn
