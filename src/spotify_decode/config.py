"""Environment-driven settings for spotify_decode."""

import logging
import os
from typing import FrozenSet

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "SPOTIFY_DECODE_LOG_LEVEL"

# Statuses that should always carry a decodable error body.
ERROR_STATUS_CODES: FrozenSet[int] = frozenset({401, 403, 404, 500, 502, 503})

RATE_LIMIT_STATUS = 429

_LEVEL_MAP = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def load_log_level() -> int:
    """Load the package log level from the environment.

    Returns:
        A ``logging`` level; INFO when the variable is unset or unknown.
    """
    value = os.environ.get(LOG_LEVEL_ENV)
    if not value:
        return logging.INFO
    level = _LEVEL_MAP.get(value.strip().upper())
    if level is None:
        logger.warning(f"Unknown {LOG_LEVEL_ENV}={value!r}, falling back to INFO")
        return logging.INFO
    return level


def apply_log_level() -> int:
    """Set the package logger level from the environment and return it."""
    level = load_log_level()
    logging.getLogger("spotify_decode").setLevel(level)
    return level
