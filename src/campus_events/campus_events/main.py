from __future__ import annotations

import atexit
import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .colleges.controller import register as register_colleges
from .common.responses import register_error_handlers
from .container import Container, build_container
from .database.bootstrap import apply_schema, list_tables, seed_demo_data
from .database.connection import DBConfig
from .events.controller import register as register_events
from .feedback.controller import register as register_feedback
from .registrations.controller import register as register_registrations
from .reports.controller import register as register_reports
from .students.controller import register as register_students

logger = logging.getLogger(__name__)

DATABASE_DIR = Path(__file__).resolve().parents[3] / "database"


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(container: Optional[Container] = None) -> Flask:
    """Build the Flask app.

    Without ``container`` the MySQL-backed one is built from the active settings
    module (``APP_ENV``); tests pass a container wired on in-memory repositories.
    """
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.json.sort_keys = False

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info("settings=%s db=%s", settings_module, DBConfig.from_dict(db_config).describe())

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=DATABASE_DIR / "schema.sql")
            logger.info("Schema ready (tables=%d)", len(list_tables(db_config)))
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            seed_demo_data(db_config)
            logger.info("Demo seed ready")

        container = build_container(db_config=db_config)
        atexit.register(container.conn.close)

    app.extensions["campus_events"] = container

    @app.route("/", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"success": True, "message": "Campus events backend is running"})

    register_error_handlers(app)
    register_colleges(app, container)
    register_students(app, container)
    register_events(app, container)
    register_registrations(app, container)
    register_feedback(app, container)
    register_reports(app, container)

    return app
