from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv

from config import get_settings_module

from .container import Container, build_container

logger = logging.getLogger(__name__)


def bootstrap() -> Container:
    """Load settings, configure logging and wire the services."""

    load_dotenv(override=False)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format=getattr(settings, "LOG_FORMAT", logging.BASIC_FORMAT),
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    db_config = getattr(settings, "DB_CONFIG")
    logger.info(
        "settings=%s db=%s@%s:%s/%s",
        settings_module,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )
    return build_container(db_config=db_config)
