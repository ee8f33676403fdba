# File: flattener/core/logging_config.py

import logging
import sys

from flattener.core.config.settings import settings

LOGGER_NAME = "flattener"


def get_logging_level(level_name: str) -> int:
    return {
        "CRITICAL": logging.CRITICAL,
        "ERROR": logging.ERROR,
        "WARNING": logging.WARNING,
        "INFO": logging.INFO,
        "DEBUG": logging.DEBUG,
    }.get(level_name.upper(), logging.INFO)


class _BelowWarning(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < logging.WARNING


def setup_logging(quiet: bool = False) -> logging.Logger:
    """
    Configures the package logger for terminal use.
    Progress goes to stdout, warnings and errors to stderr.
    Quiet mode raises the threshold to WARNING so errors still get through.
    """
    logger = logging.getLogger(LOGGER_NAME)
    level = get_logging_level(settings.LOG_LEVEL)
    if quiet:
        level = max(level, logging.WARNING)
    # Errors are never suppressed, whatever the configured level
    level = min(level, logging.ERROR)
    logger.setLevel(level)
    logger.propagate = False

    # Handlers bind the stream at creation, so rebuild them on every call
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    formatter = logging.Formatter(settings.LOG_FORMAT)

    out_handler = logging.StreamHandler(sys.stdout)
    out_handler.setFormatter(formatter)
    out_handler.addFilter(_BelowWarning())
    logger.addHandler(out_handler)

    err_handler = logging.StreamHandler(sys.stderr)
    err_handler.setLevel(logging.WARNING)
    err_handler.setFormatter(formatter)
    logger.addHandler(err_handler)

    return logger
