"""Custom exceptions for chatgrep.

Exception hierarchy::

    ChatGrepError                 (base for all chatgrep errors)
    +-- MalformedLineError        (a log line lacks its two tab delimiters)
    +-- InvalidPatternError       (a regular expression failed to compile)
    +-- ConfigurationConflictError (mutually exclusive or missing options)

None of these are retried.  The CLI reports them on stderr and exits
with status ``1``.
"""

from __future__ import annotations


class ChatGrepError(Exception):
    """Base exception for chatgrep errors."""


class MalformedLineError(ChatGrepError):
    """Raised when a log line does not contain two tab delimiters.

    Processing of the file containing the line stops at this point.

    Attributes:
        raw_line: The offending line text.
        line_number: 1-based line number within its source, or ``0`` when
            unknown.
        source: Identifier of the file (or other stream) being read.
    """

    def __init__(
        self,
        message: str,
        raw_line: str = "",
        line_number: int = 0,
        source: str = "<string>",
    ) -> None:
        super().__init__(message)
        self.raw_line = raw_line
        self.line_number = line_number
        self.source = source

    def __str__(self) -> str:
        base = super().__str__()
        if self.line_number:
            return f"{self.source}:{self.line_number}: {base}"
        return base


class InvalidPatternError(ChatGrepError):
    """Raised when a configured regular expression cannot be compiled.

    Attributes:
        pattern: The pattern text that failed to compile.
    """

    def __init__(self, message: str, pattern: str = "") -> None:
        super().__init__(message)
        self.pattern = pattern


class ConfigurationConflictError(ChatGrepError):
    """Raised when the match options are contradictory or incomplete.

    Covers ``--count`` combined with output-affecting options and runs
    that give neither a nickname nor a pattern.
    """
