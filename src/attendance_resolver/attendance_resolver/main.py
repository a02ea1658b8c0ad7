from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import build_container
from .resolution.controller import register as register_resolution

_SETTING_NAMES = (
    "CIVIL_UTC_OFFSET_MINUTES",
    "DEFAULT_SATURDAY_POLICY",
    "MINIMUM_WORKING_HOURS",
    "MAX_RANGE_DAYS",
)


def create_app(settings_module: str | None = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    # Level names are case-insensitive in .env files.
    log_level = str(getattr(settings, "LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(level=log_level, format="%(asctime)s %(levelname)s [%(name)s] %(message)s")
    logger = logging.getLogger("attendance_resolver")
    logger.setLevel(log_level)

    engine_settings = {name: getattr(settings, name) for name in _SETTING_NAMES if hasattr(settings, name)}
    if app.config["DEBUG"]:
        logger.info("settings=%s engine=%s", settings_module, engine_settings)

    container = build_container(settings=engine_settings)
    register_resolution(app, container)

    return app
