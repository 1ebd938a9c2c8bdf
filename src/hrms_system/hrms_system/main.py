from __future__ import annotations

import importlib
from pathlib import Path
from typing import Optional

import structlog
from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .common.errors import register_error_handlers
from .container import Container, build_container
from .database.bootstrap import apply_schema, list_tables
from .database.seed import seed_demo_data
from .logging import register_request_id, setup_logging

from .companies.controller import register as register_companies
from .documents.controller import register as register_documents
from .employees.controller import register as register_employees
from .leaves.controller import register as register_leaves
from .licenses.controller import register as register_licenses
from .notifications.controller import register as register_notifications
from .payroll.controller import register as register_payroll
from .users.controller import register as register_users
from .violations.controller import register as register_violations

SCHEMA_PATH = Path(__file__).resolve().parents[3] / "database" / "schema.sql"

log = structlog.get_logger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    """App factory. Tests may pass a pre-built container."""

    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.json.sort_keys = False

    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    storage_backend = getattr(settings, "STORAGE_BACKEND", "memory")
    db_config = dict(getattr(settings, "DB_CONFIG", {}))
    log.info(
        "app_settings",
        settings=settings_module,
        backend=storage_backend,
        db=f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}",
    )

    if container is None:
        if storage_backend == "mysql" and bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=SCHEMA_PATH)
            log.info("schema_ready", tables=len(list_tables(db_config)))
        container = build_container(storage_backend=storage_backend, db_config=db_config)
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            seed_demo_data(container)

    app.extensions["hrms_container"] = container

    register_request_id(app)
    register_error_handlers(app)

    register_companies(app, container)
    register_users(app, container)
    register_employees(app, container)
    register_licenses(app, container)
    register_leaves(app, container)
    register_payroll(app, container)
    register_violations(app, container)
    register_documents(app, container)
    register_notifications(app, container)

    return app
