"""Configuration utilities for utilkit.

This module centralizes the small amount of environment-driven configuration
the package reads: the log level of the ``utilkit`` logger and optional
per-logger overrides.
"""

import logging
import os
import re

LOG_LEVEL_ENV = "UTILKIT_LOG_LEVEL"  # pragma: no mutate
LOGGER_LEVELS_ENV = "UTILKIT_LOGGER_LEVELS"  # pragma: no mutate
DEFAULT_LOG_LEVEL = logging.WARNING


class InvalidLogLevelError(ValueError):
    """Raised when a configured log level or NAME=LEVEL pair cannot be parsed."""


def _level_from_name(name: str) -> int:
    if not isinstance(lvl := logging.getLevelName(name.strip().upper()), int):
        raise InvalidLogLevelError(f"Invalid log level: {name}")
    return lvl


def _normalize_items(value: str | list[str] | tuple[str, ...]) -> list[str]:
    """Normalize an input value into a flat list of items.

    Splits the input on commas and whitespace and removes empty fragments.
    Accepts either a single string (which may contain multiple comma/space-
    separated items) or a sequence of strings.
    """
    items: list[str] = []
    if isinstance(value, (tuple, list)):
        for v in value:
            items.extend([s for s in re.split(r"[,\s]+", v) if s])
    else:  # plain string
        items.extend([s for s in re.split(r"[,\s]+", value) if s])
    return items


def parse_logger_levels(value: str | list[str] | tuple[str, ...]) -> dict[str, int]:
    """Parse NAME=LEVEL pairs into a name->level dict.

    Each item must be of the form NAME=LEVEL where LEVEL is a standard logging
    level name (e.g. DEBUG, INFO, WARNING). Later items override earlier ones.

    Args:
        value: A string of comma/space-separated pairs, or a sequence of such strings.

    Returns:
        dict[str, int]: Mapping of logger names to numeric logging levels.

    Raises:
        InvalidLogLevelError: If an item is malformed or LEVEL is invalid.
    """
    levels: dict[str, int] = {}
    for item in _normalize_items(value):
        try:
            name, level_str = item.split("=", 1)
        except ValueError as e:
            raise InvalidLogLevelError(f"Expected NAME=LEVEL, got {item!r}") from e
        levels[name.strip()] = _level_from_name(level_str)
    return levels


def get_log_level() -> int:
    """Get the ``utilkit`` log level from the environment.

    Returns:
        The numeric level named by ``UTILKIT_LOG_LEVEL``, or WARNING when unset.

    Raises:
        InvalidLogLevelError: If the variable names an unknown level.
    """
    if not (name := os.environ.get(LOG_LEVEL_ENV)):
        return DEFAULT_LOG_LEVEL
    return _level_from_name(name)


def get_logger_levels() -> dict[str, int]:
    """Get per-logger level overrides from ``UTILKIT_LOGGER_LEVELS``."""
    return parse_logger_levels(os.environ.get(LOGGER_LEVELS_ENV, ""))
