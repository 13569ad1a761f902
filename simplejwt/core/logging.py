"""Logging setup for the simplejwt logger hierarchy."""

import logging

from simplejwt.core.settings import JWTSettings

LOGGER_NAME = "simplejwt"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


def resolve_log_level(raw: str) -> int:
    """Map a level name to its numeric value, defaulting to WARNING."""
    name = raw.strip().upper()
    if name in _LEVELS:
        return getattr(logging, name)
    return logging.WARNING


def configure_logging(settings: JWTSettings | None = None) -> logging.Logger:
    """Attach a stream handler to the simplejwt logger once."""
    settings = settings or JWTSettings()
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(resolve_log_level(settings.log_level))
    if not any(h.get_name() == LOGGER_NAME for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler.set_name(LOGGER_NAME)
        logger.addHandler(handler)
    return logger
