"""Tests for logging configuration."""

import logging

from nutrition_coach.api.app import create_app
from nutrition_coach.app_logging import LOGGER_NAME, configure_logging
from nutrition_coach.config import Settings
from nutrition_coach.containers import build_container


def test_configure_logging_idempotent() -> None:
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()

    first = configure_logging()
    first_count = len(logger.handlers)

    second = configure_logging()
    second_count = len(logger.handlers)

    assert first is second is logger
    assert first_count == 1
    assert second_count == 1
    assert logger.propagate is False


def test_debug_lowers_level() -> None:
    logger = configure_logging(debug=True)
    assert logger.level == logging.DEBUG

    configure_logging()
    assert logger.level == logging.INFO


def test_app_follows_debug_setting() -> None:
    container = build_container(Settings(debug=True, default_timezone="UTC"))

    create_app(container)

    assert logging.getLogger(LOGGER_NAME).level == logging.DEBUG
    configure_logging()
