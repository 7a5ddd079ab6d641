from __future__ import annotations

import importlib
import logging
from pathlib import Path

from dotenv import load_dotenv

from config import get_settings_module

from .container import Container, build_container
from .database.bootstrap import apply_schema, list_tables
from .database.connection import DBConfig

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parents[2] / "database" / "schema.sql"


def build_from_settings() -> Container:
    """Load .env and the active settings module, then wire the service container."""
    load_dotenv(override=False)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    db_config = dict(getattr(settings, "DB_CONFIG"))

    logging.basicConfig(
        level=str(getattr(settings, "LOG_LEVEL", "INFO")).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = DBConfig.from_dict(db_config)
    logger.info("settings=%s db=%s", settings_module, config.describe())

    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        apply_schema(config, schema_path=SCHEMA_PATH)
        logger.info("schema ready (tables=%s)", len(list_tables(config)))

    return build_container(db_config=db_config)
