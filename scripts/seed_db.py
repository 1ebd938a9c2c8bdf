from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

import structlog

from config import get_settings_module

from src.hrms_system.hrms_system.container import build_container
from src.hrms_system.hrms_system.database.seed import seed_demo_data
from src.hrms_system.hrms_system.logging import setup_logging

log = structlog.get_logger("scripts.seed_db")


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    db_config = dict(settings.DB_CONFIG)

    container = build_container(storage_backend="mysql", db_config=db_config)
    seeded = seed_demo_data(container)
    log.info(
        "seed_finished",
        seeded=seeded,
        target=f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}",
    )


if __name__ == "__main__":
    main()
