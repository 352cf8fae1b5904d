"""Data models for chatgrep."""

from __future__ import annotations

from chatgrep.models.line import LogLine
from chatgrep.models.options import MatchOptions, build_match_options
from chatgrep.models.outcome import (
    ContentMatch,
    MatchOutcome,
    NickOnlyMatch,
    NoMatch,
    Skipped,
    Span,
)

__all__ = [
    "ContentMatch",
    "LogLine",
    "MatchOptions",
    "MatchOutcome",
    "NickOnlyMatch",
    "NoMatch",
    "Skipped",
    "Span",
    "build_match_options",
]
