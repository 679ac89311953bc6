"""
Logging configuration helpers.
Routers and startup hooks log through module loggers; this sets the process-wide format and level once.
"""

from __future__ import annotations

import logging

from club_registry.api.api_config import get_api_config

_LOGGING_CONFIGURED = False


def configure_logging() -> None:
    """Configure process-wide logging from environment settings."""

    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    level_name = get_api_config().log_level
    level = getattr(logging, level_name, logging.INFO)

    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    _LOGGING_CONFIGURED = True
