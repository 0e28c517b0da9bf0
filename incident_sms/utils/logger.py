"""Package logging: one stdout handler on the ``incident_sms`` logger, child loggers per module."""

import logging
import sys

from incident_sms.config import get_settings

ROOT_LOGGER_NAME = "incident_sms"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str | None = None) -> logging.Logger:
    """Set the package log level and attach the stdout handler once.

    The level defaults to ``SMS_LOG_LEVEL``. Calling again only changes the level.
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel((level or get_settings().log_level).upper())

    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        root.addHandler(handler)

    return root


def get_logger(name: str) -> logging.Logger:
    """Return a logger that propagates to the package logger."""
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not root.handlers:
        configure_logging()

    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return root.getChild(name)
