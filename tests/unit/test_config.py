"""Unit tests for utilkit.config module.

These tests cover environment-driven level lookup and the NAME=LEVEL parser:
defaults, override semantics, input normalization (commas/spaces),
case-insensitivity, and error handling for malformed input.
"""

import logging

import pytest

from utilkit.config import (
    LOG_LEVEL_ENV,
    LOGGER_LEVELS_ENV,
    InvalidLogLevelError,
    get_log_level,
    get_logger_levels,
    parse_logger_levels,
)

# pylint: disable=unused-argument


def test_log_level_defaults_to_warning(clean_env):
    """Without UTILKIT_LOG_LEVEL the level is WARNING."""
    assert get_log_level() == logging.WARNING


@pytest.mark.parametrize("name, level", [("debug", logging.DEBUG), (" Info ", logging.INFO)])
def test_log_level_from_env(clean_env, name, level):
    """Level names are read case-insensitively and stripped."""
    clean_env.setenv(LOG_LEVEL_ENV, name)
    assert get_log_level() == level


def test_log_level_invalid(clean_env):
    """Unknown level names raise InvalidLogLevelError."""
    clean_env.setenv(LOG_LEVEL_ENV, "LOUD")
    with pytest.raises(InvalidLogLevelError, match="Invalid log level: LOUD"):
        get_log_level()


def test_empty_value_gives_no_overrides():
    """An empty value yields an empty mapping."""
    assert not parse_logger_levels("")
    assert not parse_logger_levels(())


def test_repeated_items_later_wins():
    """Later items override earlier ones for the same logger."""
    out = parse_logger_levels(("rich=INFO", "urllib3=ERROR", "rich=WARNING"))
    assert out == {"rich": logging.WARNING, "urllib3": logging.ERROR}


def test_string_with_commas_and_spaces():
    """Accept a plain string with commas and spaces."""
    out = parse_logger_levels("rich=INFO,  urllib3=WARNING utilkit=debug")
    assert out == {
        "rich": logging.INFO,
        "urllib3": logging.WARNING,
        "utilkit": logging.DEBUG,
    }


def test_malformed_item():
    """Items without '=' are rejected."""
    with pytest.raises(InvalidLogLevelError, match="Expected NAME=LEVEL, got 'rich'"):
        parse_logger_levels("rich")


def test_invalid_level_in_item():
    """Items with an unknown level are rejected."""
    with pytest.raises(InvalidLogLevelError, match="Invalid log level: NOPE"):
        parse_logger_levels("rich=NOPE")


def test_logger_levels_from_env(clean_env):
    """UTILKIT_LOGGER_LEVELS is parsed with the same rules."""
    assert not get_logger_levels()
    clean_env.setenv(LOGGER_LEVELS_ENV, "utilkit.arrays=ERROR")
    assert get_logger_levels() == {"utilkit.arrays": logging.ERROR}
