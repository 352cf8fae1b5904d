"""chatgrep: search weechat chat logs.

Selects log lines by speaker and/or message pattern and prints them with
surrounding context, or counts matches per file.
"""

from __future__ import annotations

from chatgrep.engine import (
    ContextLine,
    ContextWindow,
    MatchedLine,
    Separator,
    count_lines,
    stream_lines,
)
from chatgrep.exceptions import (
    ChatGrepError,
    ConfigurationConflictError,
    InvalidPatternError,
    MalformedLineError,
)
from chatgrep.matcher import LineMatcher
from chatgrep.models.line import LogLine
from chatgrep.models.options import MatchOptions, build_match_options
from chatgrep.models.outcome import ContentMatch, NickOnlyMatch, NoMatch, Skipped
from chatgrep.parser import parse_line
from chatgrep.pipeline import SearchResult, run_search

__version__ = "0.1.0"

__all__ = [
    "ChatGrepError",
    "ConfigurationConflictError",
    "ContentMatch",
    "ContextLine",
    "ContextWindow",
    "InvalidPatternError",
    "LineMatcher",
    "LogLine",
    "MalformedLineError",
    "MatchOptions",
    "MatchedLine",
    "NickOnlyMatch",
    "NoMatch",
    "SearchResult",
    "Separator",
    "Skipped",
    "build_match_options",
    "count_lines",
    "parse_line",
    "run_search",
    "stream_lines",
]
