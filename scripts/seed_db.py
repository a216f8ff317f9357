from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.classroom_attendance.classroom_attendance.database.bootstrap import apply_schema, apply_seed_sql


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    apply_schema(db_config)
    apply_seed_sql(db_config)

    print(f"OK: Seeded database -> {db_config['path']}")


if __name__ == "__main__":
    main()
