import os
from pathlib import Path

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Development keeps the database next to the project, like the desktop build did.
DB_CONFIG = {
    "path": os.getenv("DB_PATH", str(Path(__file__).resolve().parents[1] / "classes.db")),
    "timeout": float(os.getenv("DB_TIMEOUT", "5")),
}

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))

# Address encoded in check-in QR codes; empty means detect the LAN address.
ADVERTISED_HOST = os.getenv("ADVERTISED_HOST") or None

TOKEN_LENGTH = int(os.getenv("TOKEN_LENGTH", "8"))

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed demo data on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
