from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import Container, build_container
from .daily.controller import register as register_daily
from .database.bootstrap import apply_schema
from .database.connection import DBConfig
from .logging_utils import setup_logging

logger = logging.getLogger("timekeeping.app")

SCHEMA_PATH = Path(__file__).resolve().parent / "database" / "schema.sql"


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"), json_output=bool(getattr(settings, "LOG_JSON", False)))

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            statements = apply_schema(DBConfig.from_mapping(db_config), schema_path=SCHEMA_PATH)
            logger.info("schema_applied", extra={"statements": statements})
        container = build_container(
            db_config=db_config,
            absences_enabled=bool(getattr(settings, "ABSENCES_ENABLED", False)),
            max_recalc_days=int(getattr(settings, "MAX_RECALC_DAYS", 366)),
        )

    logger.info(
        "app_configured",
        extra={"settings": settings_module, "absences_enabled": container.absences_repo is not None},
    )

    register_daily(app, container)
    return app
