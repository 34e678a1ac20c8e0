"""Logging setup for the isoperiod package"""

import logging
from typing import Optional

from isoperiod.core.config import Settings, settings as default_settings

PACKAGE_LOGGER = "isoperiod"

# Console output, attached at most once
console_handler = logging.StreamHandler()


def configure_logging(settings: Optional[Settings] = None) -> logging.Logger:
    """Attach the console handler to the package logger and set its level"""
    settings = settings or default_settings

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(settings.effective_log_level)

    console_handler.setFormatter(logging.Formatter(settings.log_format))
    if console_handler not in logger.handlers:
        logger.addHandler(console_handler)

    return logger
