"""Diagnostic logging for chatgrep.

Search results go to stdout; diagnostics go to stderr through a single
handler on the ``chatgrep`` package logger, so importing chatgrep as a
library leaves the root logger alone.

The level comes from, in order of precedence: ``-v`` on the command
line (DEBUG), ``LOG_LEVEL`` from the environment, then WARNING.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

PACKAGE_LOGGER = "chatgrep"
DEFAULT_LEVEL = "WARNING"

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

_handler: logging.Handler | None = None


def resolve_level(verbose: bool = False, configured: str | None = None) -> str:
    """Pick the effective level name for a run.

    Args:
        verbose: ``-v`` was given.
        configured: Level name from the environment, if any.

    Returns:
        An upper-case level name.
    """
    if verbose:
        return "DEBUG"
    if configured:
        return configured.upper()
    return DEFAULT_LEVEL


def setup_logging(level: str = DEFAULT_LEVEL, stream: TextIO | None = None) -> logging.Logger:
    """Attach the chatgrep stderr handler and set the package level.

    Repeated calls update the level of the existing handler instead of
    adding another one.

    Args:
        level: A standard logging level name, case-insensitive.
        stream: Destination for diagnostics.  Defaults to ``sys.stderr``.

    Returns:
        The ``chatgrep`` package logger.

    Raises:
        ValueError: If *level* is not a recognised logging level name.
    """
    global _handler

    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level!r}")

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(numeric_level)

    if _handler is None or _handler not in logger.handlers:
        _handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
        _handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_DATE_FORMAT))
        logger.addHandler(_handler)

    _handler.setLevel(numeric_level)
    return logger
