from __future__ import annotations

import atexit
import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.logging_utils import configure_logging
from .container import Container, build_container
from .database.bootstrap import apply_schema, ensure_demo_employees, list_tables

logger = logging.getLogger(__name__)

DEFAULT_SCHEMA_PATH = Path(__file__).resolve().parents[2] / "database" / "schema.sql"


def create_app(*, settings_module: Optional[str] = None, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    db_config = getattr(settings, "DB_CONFIG", {})
    persistence = bool(getattr(settings, "PERSISTENCE_ENABLED", True))
    logger.info("Starting timekeeping", extra={"settings": settings_module, "persistence": persistence})

    if persistence and getattr(settings, "AUTO_INIT_DB", False):
        schema_path = Path(getattr(settings, "SCHEMA_PATH", DEFAULT_SCHEMA_PATH))
        apply_schema(db_config, schema_path=schema_path)
        logger.info("Schema ready", extra={"tables": len(list_tables(db_config))})
    if persistence and getattr(settings, "AUTO_SEED_DB", False):
        ensure_demo_employees(db_config)

    container = container or build_container(settings=settings)
    app.extensions["timekeeping"] = container
    atexit.register(container.record_sync.shutdown)

    register_attendance(app, container)

    return app
