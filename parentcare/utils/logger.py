"""
ParentCare Logger
Module loggers hang off the ``parentcare`` logger, which gets one stdout
handler honouring LOG_LEVEL and JSON_LOGS unless the application configured it.
"""

import logging
import sys
from typing import Optional

from .config import get_settings
from .logging_config import build_formatter

PACKAGE_LOGGER = "parentcare"


def _ensure_package_handler() -> None:
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if package_logger.handlers:
        return

    settings = get_settings()
    level = getattr(logging, settings.log_level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(
        build_formatter(json_logs=settings.json_logs, service_name=settings.service_name)
    )

    package_logger.setLevel(level)
    package_logger.addHandler(handler)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger inside the package hierarchy

    Args:
        name: Logger name (usually __name__)
    """
    _ensure_package_handler()
    return logging.getLogger(name or PACKAGE_LOGGER)
