"""Logging configuration helpers."""

import logging

LOGGER_NAME = "nutrition_coach"
LOG_FORMAT = "%(levelname)s: %(name)s: %(message)s"


def configure_logging(debug: bool = False) -> logging.Logger:
    """Set up the package logger once and return it.

    ``debug`` lowers the level so the analyzers' skipped-analysis messages
    and per-run summaries are emitted. Later calls only adjust the level.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
    return logger
