"""Opt-in logging setup for applications that use utilkit.

The helpers themselves only emit DEBUG records (rejected arguments, shuffle
paths) and the package installs a ``NullHandler``, so nothing is printed
unless an application asks for it. :func:`configure_logging` is that switch:

- By default it attaches a Rich console handler to the ``utilkit`` logger
  only, leaving the rest of the application's logging alone.
- With ``capture_all=True`` the handler goes on the root logger instead.
  Records from other packages then share the console, and their lines are
  tagged with the top-level package name (``[urllib3] ...``).
- With ``record_to=<path>`` a flight recorder buffers every record in memory
  and writes the buffer to ``path`` once a WARNING (or worse) arrives.
"""

from __future__ import annotations

import logging
from logging.handlers import MemoryHandler
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler

from utilkit.config import get_log_level, get_logger_levels

if TYPE_CHECKING:
    from pathlib import Path

# pylint: disable=too-few-public-methods

PROJECT_LOGGER = "utilkit"
RECORDER_FORMAT = "[%(asctime)s] %(levelname)s %(name)s:%(lineno)d: %(message)s"

# Set on every handler configure_logging installs, so a later call can find them.
_INSTALLED_MARK = "_utilkit_installed"


class ForeignLoggerFilter(logging.Filter):
    """Set ``record.origin`` to ``"[pkg] "`` for records from other packages.

    utilkit's own records get an empty origin. Nothing is filtered out.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        top_level = record.name.split(".")[0]
        record.origin = "" if top_level == PROJECT_LOGGER else f"[{top_level}] "
        return True


def console_handler(
    level: int = logging.INFO, *, verbose: bool = False, color: bool = True
) -> RichHandler:
    """Build a Rich handler writing to stderr.

    Args:
        level: Minimum level shown; ignored (DEBUG) when ``verbose``.
        verbose: Show timestamps, logger names and source locations.
        color: Set False to disable ANSI colors.
    """
    handler = RichHandler(
        level=logging.DEBUG if verbose else level,
        console=Console(stderr=True, color_system="auto" if color else None),
        rich_tracebacks=True,
        show_time=verbose,
        show_path=verbose,
    )
    handler.addFilter(ForeignLoggerFilter())
    handler.setFormatter(
        logging.Formatter("%(name)s: %(message)s" if verbose else "%(origin)s%(message)s")
    )
    return handler


def flight_recorder(
    path: Path, capacity: int = 2000, flush_level: int = logging.WARNING
) -> MemoryHandler:
    """Build a handler that buffers records and dumps them to ``path`` on trouble.

    Up to ``capacity`` records are held in memory. The buffer is written out
    when it fills up or when a record at ``flush_level`` or above arrives;
    records still buffered when the handler closes are discarded.
    """
    target = logging.FileHandler(path, mode="w", encoding="utf-8")
    target.setLevel(logging.DEBUG)
    target.setFormatter(logging.Formatter(RECORDER_FORMAT))
    return MemoryHandler(
        capacity, flushLevel=flush_level, target=target, flushOnClose=False
    )


def _remove_installed(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        if getattr(handler, _INSTALLED_MARK, False):
            logger.removeHandler(handler)
            if isinstance(handler, MemoryHandler) and handler.target is not None:
                handler.target.close()
            handler.close()


def configure_logging(  # pylint: disable=too-many-arguments
    *,
    level: int | None = None,
    verbose: bool = False,
    color: bool = True,
    capture_all: bool = False,
    record_to: Path | None = None,
    capacity: int = 2000,
) -> logging.Logger:
    """Route utilkit's log records (and optionally everyone's) somewhere visible.

    Calling this again replaces the handlers installed by the previous call;
    handlers added by the application itself are left in place.

    Args:
        level: Console level; defaults to ``UTILKIT_LOG_LEVEL`` (WARNING).
        verbose: Log everything at DEBUG with names and source locations.
        color: Set False to disable ANSI colors.
        capture_all: Attach to the root logger instead of the ``utilkit`` logger.
        record_to: If given, also keep a flight recorder writing to this file.
        capacity: Number of records the flight recorder buffers.

    Returns:
        logging.Logger: The logger the handlers were attached to.
    """
    if level is None:
        level = get_log_level()

    _remove_installed(logging.getLogger())
    _remove_installed(logging.getLogger(PROJECT_LOGGER))

    target = logging.getLogger() if capture_all else logging.getLogger(PROJECT_LOGGER)
    if capture_all:
        # Let utilkit records fall through to the root level.
        logging.getLogger(PROJECT_LOGGER).setLevel(logging.NOTSET)
    installed: list[logging.Handler] = [console_handler(level, verbose=verbose, color=color)]
    if record_to is not None:
        installed.append(flight_recorder(record_to, capacity=capacity))
    for handler in installed:
        setattr(handler, _INSTALLED_MARK, True)
        target.addHandler(handler)

    # The recorder wants DEBUG records even when the console shows fewer.
    target.setLevel(logging.DEBUG if verbose or record_to is not None else level)

    for name, lvl in get_logger_levels().items():
        logging.getLogger(name).setLevel(lvl)

    return target
