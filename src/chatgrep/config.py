"""Configuration loading for chatgrep.

Reads settings from environment variables (with .env support via
python-dotenv).  Match options come from the command line instead; see
:mod:`chatgrep.models.options`.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

_DEFAULT_LOG_SUBDIR = Path(".weechat") / "logs"


class ConfigError(Exception):
    """Raised when required configuration is missing or invalid."""


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables.

    Attributes:
        log_dir: Directory searched for weechat log files, or ``None``
            when neither ``CHATGREP_LOG_DIR`` nor ``HOME`` is set.
        log_level: Logging level name (default ``"WARNING"``).
    """

    log_dir: Path | None = None
    log_level: str = "WARNING"

    def require_log_dir(self) -> Path:
        """Return :attr:`log_dir`, or raise if it could not be determined.

        Raises:
            ConfigError: If no log directory is configured.
        """
        if self.log_dir is None:
            raise ConfigError(
                "Cannot locate log directory: set CHATGREP_LOG_DIR or HOME"
            )
        return self.log_dir


def load_settings() -> Settings:
    """Load settings from environment variables.

    ``CHATGREP_LOG_DIR`` selects the log directory; without it the
    directory defaults to ``$HOME/.weechat/logs``.  ``LOG_LEVEL`` sets
    the logging level.  A missing directory is not an error here, since
    files may be given explicitly; see :meth:`Settings.require_log_dir`.

    Returns:
        A :class:`Settings` instance.

    Raises:
        ConfigError: If ``LOG_LEVEL`` is not a logging level name.
    """
    load_dotenv()

    log_dir: Path | None = None
    raw_dir = os.environ.get("CHATGREP_LOG_DIR", "").strip()
    home = os.environ.get("HOME", "").strip()
    if raw_dir:
        log_dir = Path(raw_dir).expanduser()
    elif home:
        log_dir = Path(home) / _DEFAULT_LOG_SUBDIR

    log_level = os.environ.get("LOG_LEVEL", "").strip()
    if not log_level:
        return Settings(log_dir=log_dir)

    if not isinstance(logging.getLevelName(log_level.upper()), int):
        raise ConfigError(f"Invalid LOG_LEVEL: {log_level!r}")
    return Settings(log_dir=log_dir, log_level=log_level.upper())
