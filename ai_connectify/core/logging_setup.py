"""
Logging configuration for the library logger tree.

Only the "ai_connectify" logger is configured; the application's root logger
is left alone.
"""

import logging

from .config import Settings, get_settings

LIBRARY_LOGGER = "ai_connectify"


def setup_logging(settings: Settings | None = None) -> logging.Logger:
    """
    Apply level and format from settings to the library logger.

    Calling it more than once replaces the handler instead of stacking them.
    """
    settings = settings or get_settings()
    logger = logging.getLogger(LIBRARY_LOGGER)
    logger.setLevel(settings.log_level.upper())

    for handler in list(logger.handlers):
        if getattr(handler, "_ai_connectify", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(settings.log_format))
    handler._ai_connectify = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    return logger
