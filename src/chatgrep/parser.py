"""Parser for tab-delimited chat log lines.

Turns one raw line of a weechat-style log into a
:class:`~chatgrep.models.line.LogLine`.  A line must contain at least
two tab characters; anything else is rejected with
:class:`~chatgrep.exceptions.MalformedLineError`.
"""

from __future__ import annotations

from chatgrep.exceptions import MalformedLineError
from chatgrep.models.line import LogLine


def parse_line(
    raw: str,
    line_number: int = 0,
    source: str = "<string>",
) -> LogLine:
    """Parse a raw log line into a :class:`LogLine` view.

    Args:
        raw: The line text without its terminator.
        line_number: 1-based position of the line in its source, used
            for error reporting only.
        source: Identifier of the stream the line came from.

    Returns:
        A :class:`LogLine` holding *raw* and the two delimiter offsets.

    Raises:
        MalformedLineError: If *raw* has fewer than two tab characters.
    """
    first_tab = raw.find("\t")
    if first_tab < 0:
        raise MalformedLineError(
            "Malformed log line: no tab after timestamp",
            raw_line=raw,
            line_number=line_number,
            source=source,
        )

    second_tab = raw.find("\t", first_tab + 1)
    if second_tab < 0:
        raise MalformedLineError(
            "Malformed log line: no tab after speaker",
            raw_line=raw,
            line_number=line_number,
            source=source,
        )

    return LogLine(raw=raw, first_tab=first_tab, second_tab=second_tab)
