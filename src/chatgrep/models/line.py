"""Log line view for tab-delimited chat logs.

A log line has the layout ``timestamp<TAB>speaker<TAB>message``.  The
message may contain further tabs.  :class:`LogLine` keeps the original
text plus the offsets of the two delimiters; the fields are sliced out
on access, so nothing is copied until asked for.
"""

from __future__ import annotations

from dataclasses import dataclass

# Single-character status prefixes weechat puts in front of nicks.
STATUS_PREFIXES: frozenset[str] = frozenset({"@", "+"})

# Pseudo-speakers used for join, part, quit and topic notices.
JOIN_SPEAKERS: frozenset[str] = frozenset({"<--", "-->", "--"})


@dataclass(frozen=True)
class LogLine:
    """A parsed view over a single raw log line.

    Instances are produced by :func:`chatgrep.parser.parse_line`, which
    guarantees ``0 <= first_tab < second_tab < len(raw)``.

    Attributes:
        raw: The original line text, without its line terminator.
        first_tab: Offset of the tab ending the timestamp.
        second_tab: Offset of the tab ending the speaker.
    """

    raw: str
    first_tab: int
    second_tab: int

    @property
    def timestamp(self) -> str:
        """Everything before the first tab."""
        return self.raw[: self.first_tab]

    @property
    def raw_speaker(self) -> str:
        """Speaker field exactly as written, status prefix included."""
        return self.raw[self.first_tab + 1 : self.second_tab]

    @property
    def speaker(self) -> str:
        """Speaker with a single leading ``@`` or ``+`` removed."""
        start = self.first_tab + 1
        if start < self.second_tab and self.raw[start] in STATUS_PREFIXES:
            start += 1
        return self.raw[start : self.second_tab]

    @property
    def message(self) -> str:
        """Everything after the second tab."""
        return self.raw[self.second_tab + 1 :]

    @property
    def without_timestamp(self) -> str:
        """The raw line with its timestamp field and first tab removed."""
        return self.raw[self.first_tab + 1 :]

    def is_join(self) -> bool:
        """Return ``True`` for join/part/quit/topic pseudo-speaker lines."""
        return self.speaker in JOIN_SPEAKERS
