from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .checkin.controller import register as register_checkin
from .classes.controller import register as register_classes
from .common.web import register_error_handlers
from .container import build_container
from .core.constants import DEFAULT_PORT, DEFAULT_TOKEN_LENGTH
from .database.bootstrap import apply_schema, apply_seed_sql, list_tables
from .lessons.controller import register as register_lessons
from .students.controller import register as register_students
from .tokens.controller import register as register_tokens

logger = logging.getLogger(__name__)


def _configure_logging(level: str, debug: bool) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    if not debug:
        logging.getLogger("werkzeug").setLevel(logging.WARNING)


def create_app(*, db_config: Optional[dict] = None, settings_module: Optional[str] = None) -> Flask:
    """Build the Flask app.

    ``db_config`` overrides the settings' store so tests can pass an
    isolated database file.
    """

    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = dict(db_config or getattr(settings, "DB_CONFIG"))
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["HOST"] = getattr(settings, "HOST", "0.0.0.0")
    app.config["PORT"] = int(getattr(settings, "PORT", DEFAULT_PORT))

    _configure_logging(getattr(settings, "LOG_LEVEL", "INFO"), app.config["DEBUG"])
    logger.info("settings=%s db=%s", settings_module, db_config.get("path"))

    if bool(getattr(settings, "AUTO_INIT_DB", True)):
        apply_schema(db_config)
        logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
    if bool(getattr(settings, "AUTO_SEED_DB", False)):
        apply_seed_sql(db_config)
        logger.info("demo seed ready")

    container = build_container(
        db_config=db_config,
        port=app.config["PORT"],
        token_length=int(getattr(settings, "TOKEN_LENGTH", DEFAULT_TOKEN_LENGTH)),
        advertised_host=getattr(settings, "ADVERTISED_HOST", None),
    )
    app.extensions["container"] = container

    register_error_handlers(app)
    register_classes(app, container)
    register_students(app, container)
    register_lessons(app, container)
    register_attendance(app, container)
    register_tokens(app, container)
    register_checkin(app, container)

    return app


def run() -> None:
    app = create_app()
    # Bind every interface so student devices on the LAN can reach /checkin.
    app.run(host=app.config["HOST"], port=app.config["PORT"], debug=app.config["DEBUG"], use_reloader=False)


if __name__ == "__main__":
    run()
