"""Text formatting for chatgrep output.

Every formatter returns a plain string.  When *color* is enabled, ANSI
sequences from :mod:`colorama` mark matched spans and count summaries;
when it is disabled the output is exactly the tab-delimited log text.
"""

from __future__ import annotations

from typing import TextIO

from colorama import Fore, Style

from chatgrep.engine import ContextLine, MatchedLine, OutputRecord, Separator
from chatgrep.models.outcome import Span

_MATCH_STYLE = Fore.RED + Style.BRIGHT
_NAME_STYLE = Fore.MAGENTA
_COLON_STYLE = Fore.CYAN


def highlight(text: str, spans: tuple[Span, ...], color: bool) -> str:
    """Return *text* with each ``(start, end)`` span marked.

    Spans must be ordered and non-overlapping.
    """
    if not color or not spans:
        return text

    parts: list[str] = []
    cursor = 0
    for start, end in spans:
        parts.append(text[cursor:start])
        parts.append(f"{_MATCH_STYLE}{text[start:end]}{Style.RESET_ALL}")
        cursor = end
    parts.append(text[cursor:])
    return "".join(parts)


def format_record(
    record: OutputRecord,
    strip_timestamps: bool = False,
    color: bool = False,
) -> str:
    """Render one output record as a line of text (without newline)."""
    if isinstance(record, MatchedLine):
        line = record.line
        fields = [line.speaker, highlight(line.message, record.spans, color)]
        if not strip_timestamps:
            fields.insert(0, line.timestamp)
        return "\t".join(fields)

    if isinstance(record, ContextLine):
        if strip_timestamps:
            return record.line.without_timestamp
        return record.line.raw

    if isinstance(record, Separator):
        return record.text

    raise TypeError(f"Unknown output record: {record!r}")


def format_count(name: str, count: int, color: bool = False) -> str:
    """Render a per-file count summary as ``name:count``."""
    if not color:
        return f"{name}:{count}"
    return (
        f"{_NAME_STYLE}{name}{Style.RESET_ALL}"
        f"{_COLON_STYLE}:{Style.RESET_ALL}{count}"
    )


def write_line(out: TextIO, text: str) -> None:
    """Write *text* followed by a newline to *out*."""
    out.write(text + "\n")
