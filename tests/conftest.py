"""Global pytest fixtures for utilkit."""

import logging
from logging.handlers import MemoryHandler

import pytest

from utilkit.config import LOG_LEVEL_ENV, LOGGER_LEVELS_ENV


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove utilkit environment variables for the duration of a test."""
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    monkeypatch.delenv(LOGGER_LEVELS_ENV, raising=False)
    return monkeypatch


@pytest.fixture
def logging_state():
    """Restore the root and ``utilkit`` loggers after a test configures logging.

    Only handlers installed by ``configure_logging`` are removed, so pytest's own
    capture handlers are untouched.
    """
    loggers = [logging.getLogger(), logging.getLogger("utilkit")]
    saved_levels = [logger.level for logger in loggers]
    yield loggers
    for logger, level in zip(loggers, saved_levels):
        for handler in list(logger.handlers):
            if getattr(handler, "_utilkit_installed", False):
                logger.removeHandler(handler)
                if isinstance(handler, MemoryHandler) and handler.target is not None:
                    handler.target.close()
                handler.close()
        logger.setLevel(level)
