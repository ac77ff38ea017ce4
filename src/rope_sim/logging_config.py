# MIT License (see LICENSE)
"""
Logging setup for applications and scripts using rope_sim.

The library only creates module loggers (logging.getLogger(__name__)) and
never installs handlers on import. Call setup_logging() once from an entry
point to see its output. Only the "rope_sim" logger is configured; the root
logger and its handlers are left to the host application.
"""
from __future__ import annotations
import logging
import sys

LOGGER_NAME = "rope_sim"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: int = logging.INFO, log_file: str | None = None) -> logging.Logger:
    """
    Configure the "rope_sim" logger with a console handler and an optional file handler.

    Calling it again replaces the handlers installed by the previous call.

    Args:
        level: Minimum level to emit (e.g. logging.DEBUG during development).
        log_file: Optional path of a file that receives the same records.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
