"""Line classification against a set of match options.

:class:`LineMatcher` compiles the search pattern once and classifies
each :class:`~chatgrep.models.line.LogLine` into one of the
:data:`~chatgrep.models.outcome.MatchOutcome` variants.  The checks run
in a fixed order:

1. join suppression (``strip_joins``) wins over everything else,
2. the nickname filter,
3. nickname-only selection when no pattern is configured,
4. the pattern search, literal or regular expression.
"""

from __future__ import annotations

import logging
import re

from chatgrep.exceptions import InvalidPatternError
from chatgrep.models.line import LogLine
from chatgrep.models.options import MatchOptions
from chatgrep.models.outcome import (
    NICK_ONLY_MATCH,
    NO_MATCH,
    SKIPPED,
    ContentMatch,
    MatchOutcome,
    Span,
)

logger = logging.getLogger(__name__)


def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Compile *pattern* as a regular expression.

    Raises:
        InvalidPatternError: If *pattern* is not a valid expression.
    """
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise InvalidPatternError(
            f"Invalid regular expression {pattern!r}: {exc}", pattern=pattern
        ) from exc


def find_fixed(text: str, needle: str) -> list[Span]:
    """Return spans of all non-overlapping occurrences of *needle*.

    Scanning resumes at the end of each occurrence.
    """
    spans: list[Span] = []
    start = text.find(needle)
    while start >= 0:
        end = start + len(needle)
        spans.append((start, end))
        start = text.find(needle, end)
    return spans


def find_regex(text: str, regex: re.Pattern[str]) -> list[Span]:
    """Return spans of all non-overlapping matches of *regex*."""
    return [match.span() for match in regex.finditer(text)]


class LineMatcher:
    """Classify log lines against validated :class:`MatchOptions`.

    Args:
        options: The run's match options.

    Raises:
        InvalidPatternError: If regex mode is in effect and the pattern
            does not compile.
    """

    def __init__(self, options: MatchOptions) -> None:
        self.options = options
        self._regex: re.Pattern[str] | None = None
        if options.pattern and not options.fixed:
            self._regex = compile_pattern(options.pattern)
        logger.debug(
            "Matcher ready: nickname=%r pattern=%r fixed=%s strip_joins=%s",
            options.nickname,
            options.pattern,
            options.fixed,
            options.strip_joins,
        )

    def classify(self, line: LogLine) -> MatchOutcome:
        """Classify *line* into a :data:`MatchOutcome`."""
        options = self.options

        if options.strip_joins and line.is_join():
            return SKIPPED

        if options.nickname and options.nickname != line.speaker:
            return NO_MATCH

        if not options.pattern:
            return NICK_ONLY_MATCH

        if self._regex is None:
            spans = find_fixed(line.message, options.pattern)
        else:
            spans = find_regex(line.message, self._regex)

        if not spans:
            return NO_MATCH
        return ContentMatch(tuple(spans))
