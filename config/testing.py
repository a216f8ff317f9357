import os
import tempfile
from pathlib import Path

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "path": os.getenv("DB_PATH", str(Path(tempfile.gettempdir()) / "classroom_attendance_test.db")),
    "timeout": 5.0,
}

HOST = "127.0.0.1"
PORT = 3000

ADVERTISED_HOST = "192.168.1.10"

TOKEN_LENGTH = 8

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = True
AUTO_SEED_DB = False
