"""Tests for logging configuration."""

import logging

from photo_share.app_logging import configure_logging


def test_configure_logging_idempotent() -> None:
    logger = logging.getLogger("photo_share")
    logger.handlers.clear()

    configure_logging()
    first_count = len(logger.handlers)

    configure_logging("debug")
    second_count = len(logger.handlers)

    assert first_count == 1
    assert second_count == 1
    assert logger.level == logging.DEBUG


def test_service_loggers_use_package_handler() -> None:
    logger = logging.getLogger("photo_share")
    logger.handlers.clear()
    configure_logging("INFO")

    assert logging.getLogger("photo_share.services.auth").getEffectiveLevel() == (
        logging.INFO
    )
    assert logger.propagate is False
