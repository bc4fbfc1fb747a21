from __future__ import annotations

import importlib
import logging
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from flask import Flask

from .config import get_settings_module
from .container import build_backend, build_container
from .storage.bootstrap import apply_schema, list_tables, seed_demo_state
from .storage.store import StateStore
from .web.errors import register_error_handlers

from .attendance.controller import register as register_attendance
from .bonus.controller import register as register_bonus
from .employees.controller import register as register_employees
from .leaves.controller import register as register_leaves
from .notes.controller import register as register_notes
from .notifications.controller import register as register_notifications
from .payroll.controller import register as register_payroll
from .reports.controller import register as register_reports
from .shifts.controller import register as register_shifts

logger = logging.getLogger(__name__)


def load_settings(settings_module: Optional[str] = None) -> Dict[str, Any]:
    module = importlib.import_module(settings_module or get_settings_module())
    settings = {name: getattr(module, name) for name in dir(module) if name.isupper()}
    settings["SETTINGS_MODULE"] = module.__name__
    return settings


def create_app(settings_module: Optional[str] = None, *, store: Optional[StateStore] = None) -> Flask:
    load_dotenv(override=False)
    settings = load_settings(settings_module)

    logging.basicConfig(
        level=str(settings.get("LOG_LEVEL", "INFO")).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = Flask(__name__)
    app.secret_key = settings["SECRET_KEY"]
    app.config["DEBUG"] = bool(settings.get("DEBUG", False))
    app.config["TESTING"] = bool(settings.get("TESTING", False))

    backend_kind = str(settings.get("STORAGE_BACKEND", "memory")).lower()
    logger.info("settings=%s backend=%s", settings["SETTINGS_MODULE"], backend_kind)

    if store is None:
        if backend_kind == "mysql" and settings.get("AUTO_INIT_DB"):
            db_config = settings["DB_CONFIG"]
            apply_schema(db_config)
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
        store = StateStore(build_backend(settings))

    if settings.get("AUTO_SEED_DB") and seed_demo_state(store):
        logger.info("demo seed ready")

    container = build_container(store=store, settings=settings)
    app.extensions["bistro_staff"] = container

    register_error_handlers(app)
    register_employees(app, container)
    register_shifts(app, container)
    register_attendance(app, container)
    register_leaves(app, container)
    register_bonus(app, container)
    register_payroll(app, container)
    register_notifications(app, container)
    register_notes(app, container)
    register_reports(app, container)

    return app
