"""Logging configuration helpers."""

import logging

LOG_FORMAT = "%(levelname)s: %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure the photo_share logger with a single stream handler.

    Calling it again only updates the level.
    """
    logger = logging.getLogger("photo_share")
    logger.setLevel(level.upper())
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
