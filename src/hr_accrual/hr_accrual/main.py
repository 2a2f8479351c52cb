from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from config import get_settings_module

from .container import Container, build_container
from .database.bootstrap import apply_schema, list_tables

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parents[3] / "database" / "schema.sql"


def load_settings(settings_module: Optional[str] = None):
    load_dotenv(override=False)
    return importlib.import_module(settings_module or get_settings_module())


def create_container(settings_module: Optional[str] = None) -> Container:
    """Load settings, optionally apply the schema, and wire repositories/services."""
    settings = load_settings(settings_module)
    db_config = getattr(settings, "DB_CONFIG")

    container = build_container(
        db_config=db_config,
        strict_date_order=bool(getattr(settings, "STRICT_DATE_ORDER", True)),
        late_grace_minutes=int(getattr(settings, "LATE_GRACE_MINUTES", 1)),
    )

    if getattr(settings, "DEBUG", False):
        logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings.__name__,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )

    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        apply_schema(container.conn, schema_path=SCHEMA_PATH)
        logger.info("schema ready (tables=%d)", len(list_tables(container.conn)))

    return container
