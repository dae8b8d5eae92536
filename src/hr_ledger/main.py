from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask

from .config import get_settings_module
from .container import Container, build_container
from .database.bootstrap import ensure_database

from .attendance.controller import register as register_attendance
from .billing.controller import register as register_billing
from .company.controller import register as register_company
from .employees.controller import register as register_employees
from .export.controller import register as register_export
from .holidays.controller import register as register_holidays
from .ledger.controller import register as register_ledger
from .payroll.controller import register as register_payroll
from .reports.controller import register as register_reports
from .views.controller import register as register_views

logger = logging.getLogger("hr_ledger")


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(container: Container | None = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    store_backend = getattr(settings, "STORE_BACKEND", "json")
    data_dir = getattr(settings, "DATA_DIR", "data")
    db_config = getattr(settings, "DB_CONFIG", None)
    logger.info("settings=%s backend=%s", settings_module, store_backend)

    if container is None:
        if store_backend == "mysql" and getattr(settings, "AUTO_INIT_DB", False):
            ensure_database(db_config)
        container = build_container(store_backend=store_backend, data_dir=data_dir, db_config=db_config)

        if getattr(settings, "AUTO_SEED_DB", False) and not container.store.get_employees():
            from .seed import seed_demo_data

            seed_demo_data(container)
            logger.info("demo seed ready")

    app.extensions["hr_ledger"] = container

    register_employees(app, container)
    register_attendance(app, container)
    register_payroll(app, container)
    register_ledger(app, container)
    register_holidays(app, container)
    register_company(app, container)
    register_reports(app, container)
    register_billing(app, container)
    register_export(app, container)
    register_views(app, container)

    return app
