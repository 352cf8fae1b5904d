"""Streaming and counting over a sequence of log lines.

:func:`stream_lines` turns lines into output records, tracking two
pieces of per-stream state:

- a :class:`ContextWindow` of the most recent non-matching lines, which
  are flushed oldest-first when a match arrives, and
- a countdown of lines still to echo after the last match.  When the
  countdown reaches zero a :class:`Separator` closes the block.

:func:`count_lines` totals matches instead.  Content matches count once
per span, nickname-only matches count once.

Both functions parse lazily and stop at the first malformed line by
raising :class:`~chatgrep.exceptions.MalformedLineError`.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Union

from chatgrep.matcher import LineMatcher
from chatgrep.models.line import LogLine
from chatgrep.models.outcome import ContentMatch, NickOnlyMatch, NoMatch, Span
from chatgrep.parser import parse_line

logger = logging.getLogger(__name__)

SEPARATOR_TEXT = "--"


# ---------------------------------------------------------------------------
# Output records
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class MatchedLine:
    """A selected line.

    Attributes:
        line: The parsed line.
        spans: Occurrences to highlight in the message; empty for
            nickname-only matches.
    """

    line: LogLine
    spans: tuple[Span, ...] = ()


@dataclass(frozen=True)
class ContextLine:
    """A non-matching line printed before or after a match."""

    line: LogLine


@dataclass(frozen=True)
class Separator:
    """Marks the end of an after-match context block."""

    text: str = SEPARATOR_TEXT


OutputRecord = Union[MatchedLine, ContextLine, Separator]


# ---------------------------------------------------------------------------
# Context window
# ---------------------------------------------------------------------------


class ContextWindow:
    """Fixed-capacity FIFO of lines seen since the last match.

    Pushing onto a full window evicts the oldest line.  A capacity of
    zero holds nothing.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self._lines: deque[LogLine] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._lines.maxlen or 0

    def __len__(self) -> int:
        return len(self._lines)

    def push(self, line: LogLine) -> None:
        self._lines.append(line)

    def drain(self) -> list[LogLine]:
        """Return buffered lines oldest-first and empty the window."""
        lines = list(self._lines)
        self._lines.clear()
        return lines


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def strip_terminator(raw: str) -> str:
    """Remove one trailing ``\\n`` and then one trailing ``\\r``."""
    if raw.endswith("\n"):
        raw = raw[:-1]
    if raw.endswith("\r"):
        raw = raw[:-1]
    return raw


def iter_log_lines(
    lines: Iterable[str | bytes],
    source: str = "<string>",
) -> Iterator[LogLine]:
    """Parse *lines* one at a time, stripping line terminators.

    Byte lines are decoded as UTF-8.  A line that does not decode is
    skipped with a warning; line numbers still count it.

    Raises:
        MalformedLineError: On the first line without two tabs.
    """
    for line_number, raw in enumerate(lines, start=1):
        if isinstance(raw, bytes):
            try:
                raw = raw.decode("utf-8")
            except UnicodeDecodeError as exc:
                logger.warning(
                    "%s:%d: skipping line that is not valid UTF-8 (%s)",
                    source,
                    line_number,
                    exc.reason,
                )
                continue
        yield parse_line(strip_terminator(raw), line_number=line_number, source=source)


def stream_lines(
    matcher: LineMatcher,
    lines: Iterable[str | bytes],
    source: str = "<string>",
) -> Iterator[OutputRecord]:
    """Yield the output records for one stream of log lines.

    Args:
        matcher: Classifier built from the run's options.
        lines: Raw lines in file order, as text or UTF-8 bytes; one
            trailing newline per line is ignored.
        source: Identifier used in error messages.

    Yields:
        :class:`ContextLine`, :class:`MatchedLine` and :class:`Separator`
        records in output order.

    Raises:
        MalformedLineError: When a line lacks its delimiters.  Records
            for earlier lines have already been yielded.
    """
    context = matcher.options.context
    window = ContextWindow(context)
    print_after = 0

    for line in iter_log_lines(lines, source):
        outcome = matcher.classify(line)

        if isinstance(outcome, (ContentMatch, NickOnlyMatch)):
            for buffered in window.drain():
                yield ContextLine(buffered)
            spans = outcome.spans if isinstance(outcome, ContentMatch) else ()
            yield MatchedLine(line, spans)
            print_after = context
        elif isinstance(outcome, NoMatch):
            if print_after > 0:
                yield ContextLine(line)
                print_after -= 1
                if print_after == 0:
                    yield Separator()
            window.push(line)
        # Skipped lines leave the window and countdown untouched.


def count_lines(
    matcher: LineMatcher,
    lines: Iterable[str | bytes],
    source: str = "<string>",
) -> int:
    """Return the number of matches in one stream of log lines.

    Raises:
        MalformedLineError: When a line lacks its delimiters.
    """
    total = 0
    for line in iter_log_lines(lines, source):
        outcome = matcher.classify(line)
        if isinstance(outcome, (ContentMatch, NickOnlyMatch)):
            total += outcome.count
    return total
