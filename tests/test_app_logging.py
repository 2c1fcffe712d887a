"""Tests for logging configuration."""

import logging

from zero_hunger.app_logging import configure_logging


def test_configure_logging_idempotent() -> None:
    logger = logging.getLogger("zero_hunger")
    logger.handlers.clear()

    configure_logging()
    first_count = len(logger.handlers)

    configure_logging("debug")
    second_count = len(logger.handlers)

    assert first_count == 1
    assert second_count == 1
    assert logger.level == logging.DEBUG


def test_log_format_matches_level_name_message() -> None:
    logger = logging.getLogger("zero_hunger")
    logger.handlers.clear()

    configure_logging()

    record = logging.LogRecord(
        "zero_hunger.api", logging.WARNING, __file__, 1, "hello", None, None
    )

    assert logger.handlers[0].format(record) == "WARNING: zero_hunger.api: hello"
