"""
Logging helpers for semverkit.

Every module logs through a child of the ``semverkit`` logger. The package
only emits DEBUG records (rejected version strings, refused bumps) and
attaches a ``NullHandler`` until an application opts in, either by
configuring the ``semverkit`` logger itself or by calling
:func:`setup_logging`.
"""

from __future__ import annotations

import sys
import logging
import threading
from typing import IO, Optional

from semverkit.constants import (
    LOG_DATE_FORMAT,
    LOG_DEFAULT_FORMAT,
    LOG_VERBOSE_FORMAT,
)

ROOT_LOGGER_NAME = "semverkit"

_logging_configured: bool = False
_lock = threading.Lock()


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return ``semverkit`` or one of its children.

    ``"parser"`` and ``"semverkit.parser"`` name the same logger, so both
    short names and module ``__name__`` values work.
    """
    if not name or name == ROOT_LOGGER_NAME:
        qualified = ROOT_LOGGER_NAME
    elif name.startswith(f"{ROOT_LOGGER_NAME}."):
        qualified = name
    else:
        qualified = f"{ROOT_LOGGER_NAME}.{name}"

    logger = logging.getLogger(qualified)
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not root.handlers:
        root.addHandler(logging.NullHandler())
    return logger


def setup_logging(
    *,
    level: int = logging.DEBUG,
    verbose: bool = False,
    stream: Optional[IO[str]] = None,
) -> None:
    """Send semverkit diagnostics to ``stream`` (``sys.stderr`` by default).

    Replaces whatever handlers were installed by a previous call, so it
    can be called repeatedly, from any thread.

    Args:
        level: Minimum level to emit. Defaults to DEBUG, the only level
            semverkit logs at.
        verbose: Include timestamp and logger name in each line.
        stream: Destination stream.
    """
    global _logging_configured

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            LOG_VERBOSE_FORMAT if verbose else LOG_DEFAULT_FORMAT,
            datefmt=LOG_DATE_FORMAT,
        )
    )

    with _lock:
        root = logging.getLogger(ROOT_LOGGER_NAME)
        root.handlers.clear()
        root.addHandler(handler)
        root.setLevel(level)
        root.propagate = False
        _logging_configured = True


def is_logging_configured() -> bool:
    """True while a :func:`setup_logging` handler is installed."""
    return _logging_configured


def disable_logging() -> None:
    """Undo :func:`setup_logging` and return to silent library defaults."""
    global _logging_configured

    with _lock:
        root = logging.getLogger(ROOT_LOGGER_NAME)
        root.handlers.clear()
        root.addHandler(logging.NullHandler())
        root.setLevel(logging.NOTSET)
        root.propagate = True
        _logging_configured = False
