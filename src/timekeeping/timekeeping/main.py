from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .balance.controller import register as register_balance
from .container import Container, build_container
from .contracts.controller import register as register_contracts
from .core.constants import DEFAULT_DAILY_CACHE_SIZE, DEFAULT_LOG_LEVEL
from .database.bootstrap import apply_schema, list_tables
from .punches.controller import register as register_punches
from .reports.controller import register as register_reports

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(container: Optional[Container] = None, *, settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    configure_logging(getattr(settings, "LOG_LEVEL", DEFAULT_LOG_LEVEL))

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.debug(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config)
            logger.info("Schema ready (tables=%d)", len(list_tables(db_config)))

        container = build_container(
            db_config=db_config,
            cache_enabled=bool(getattr(settings, "DAILY_CACHE_ENABLED", True)),
            cache_size=int(getattr(settings, "DAILY_CACHE_SIZE", DEFAULT_DAILY_CACHE_SIZE)),
        )

    app.extensions["timekeeping"] = container

    register_punches(app, container)
    register_balance(app, container)
    register_contracts(app, container)
    register_reports(app, container)

    return app
