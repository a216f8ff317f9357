from __future__ import annotations

import logging
from pathlib import Path

from .connection import DatabaseConnection, DBConfig

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parent / "schema.sql"
SEED_PATH = Path(__file__).resolve().parent / "seed.sql"


def _open(db_config: dict):
    conn_factory = DatabaseConnection(DBConfig.from_dict(db_config))
    conn_factory.ensure_directory()
    return conn_factory.connect(dictionary=False)


def _exec_script(db_config: dict, path: Path) -> None:
    sql = Path(path).read_text(encoding="utf-8")
    conn = _open(db_config)
    try:
        conn.executescript(sql)
        conn.commit()
    finally:
        conn.close()


def apply_schema(db_config: dict, *, schema_path: str | Path = SCHEMA_PATH) -> None:
    _exec_script(db_config, Path(schema_path))
    logger.info("Schema applied to %s", db_config.get("path"))


def apply_seed_sql(db_config: dict, *, seed_path: str | Path = SEED_PATH) -> None:
    _exec_script(db_config, Path(seed_path))
    logger.info("Seed data applied to %s", db_config.get("path"))


def list_tables(db_config: dict) -> list[str]:
    conn = _open(db_config)
    try:
        cur = conn.execute(
            "SELECT name FROM sqlite_master WHERE type='table' AND name NOT LIKE 'sqlite_%' ORDER BY name"
        )
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
