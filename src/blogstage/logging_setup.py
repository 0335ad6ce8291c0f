"""Logging configuration for the server process."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def parse_level(level: str) -> int:
    """Convert a level name such as "info" or "DEBUG" to a logging level.

    Raises:
        ValueError: If the name is not a known logging level
    """
    value = logging.getLevelNamesMapping().get(level.strip().upper())
    if value is None:
        raise ValueError(f"Unknown log level: {level}")
    return value


def configure_logging(level: str) -> None:
    """Send log records at or above level to stderr.

    Replaces any handlers already installed on the root logger.
    """
    logging.basicConfig(level=parse_level(level), format=LOG_FORMAT, force=True)
