import os
from pathlib import Path

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

# Installed builds keep data in the user's home directory.
DB_CONFIG = {
    "path": os.getenv("DB_PATH", str(Path.home() / ".classroom-attendance" / "classes.db")),
    "timeout": float(os.getenv("DB_TIMEOUT", "5")),
}

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))

ADVERTISED_HOST = os.getenv("ADVERTISED_HOST") or None

TOKEN_LENGTH = int(os.getenv("TOKEN_LENGTH", "8"))

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
