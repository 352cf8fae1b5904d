"""Shared fixtures for chatgrep tests."""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator
from pathlib import Path

import pytest


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove all chatgrep-related environment variables.

    Patches ``load_dotenv`` so a real ``.env`` file cannot re-inject values
    that the test explicitly removed.
    """
    monkeypatch.setattr("chatgrep.config.load_dotenv", lambda *_a, **_kw: None)
    for key in ("CHATGREP_LOG_DIR", "LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture()
def write_log(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper that writes log lines to a file under ``tmp_path``."""

    def _write(name: str, lines: list[str], directory: Path | None = None) -> Path:
        target_dir = directory if directory is not None else tmp_path
        target_dir.mkdir(parents=True, exist_ok=True)
        path = target_dir / name
        path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def _reset_loggers() -> Generator[None, None, None]:
    """Reset the root and chatgrep loggers after each test to prevent handler leaks."""
    saved = [
        (logger, logger.handlers[:], logger.level)
        for logger in (logging.getLogger(), logging.getLogger("chatgrep"))
    ]
    yield
    for logger, handlers, level in saved:
        logger.handlers = handlers
        logger.setLevel(level)
