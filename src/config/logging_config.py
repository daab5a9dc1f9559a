"""
Berra's Casino - Logging Setup

Engines log through module-level ``logging.getLogger(__name__)`` loggers;
this module only decides the level and format for the root logger.
"""

import logging

from src.config.settings import Settings, get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(settings: Settings | None = None) -> int:
    """Configure the root logger from settings.

    Args:
        settings: Settings to read from (defaults to the cached instance)

    Returns:
        The numeric log level that was applied
    """
    settings = settings or get_settings()
    if settings.debug:
        level = logging.DEBUG
    else:
        level = logging.getLevelName(settings.log_level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level {settings.log_level!r}.")

    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)
    return level
