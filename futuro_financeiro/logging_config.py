"""
Logging configuration for the calculator API.

Every module logs through ``logging.getLogger(__name__)``; this sets up the
package logger once with a single stream handler.
"""

import logging
from typing import Union

PACKAGE_LOGGER = "futuro_financeiro"

LOG_FORMAT = "%(asctime)s - %(name)s:%(lineno)d - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_LOGGING_CONFIGURED = False


def setup_logging(level: Union[int, str] = logging.INFO) -> logging.Logger:
    """Attach a formatted stream handler to the package logger (idempotent)."""
    global _LOGGING_CONFIGURED

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    if _LOGGING_CONFIGURED:
        return logger

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    _LOGGING_CONFIGURED = True
    return logger
