"""Match outcomes produced by classifying a log line.

:data:`MatchOutcome` is a closed union of four variants.  Only
:class:`ContentMatch` carries a payload.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

Span = tuple[int, int]


@dataclass(frozen=True)
class ContentMatch:
    """The pattern occurred in the message one or more times.

    Attributes:
        spans: ``(start, end)`` offsets into the message, one per
            occurrence, in left-to-right order.  Never empty.  Offsets
            index the decoded ``str`` (code points), so they differ from
            UTF-8 byte offsets once the message holds non-ASCII text;
            ``message[start:end]`` is always the matched text.
    """

    spans: tuple[Span, ...]

    def __post_init__(self) -> None:
        if not self.spans:
            raise ValueError("ContentMatch requires at least one span")

    @property
    def count(self) -> int:
        return len(self.spans)


@dataclass(frozen=True)
class NickOnlyMatch:
    """The nickname filter matched and no pattern was configured."""

    @property
    def count(self) -> int:
        return 1


@dataclass(frozen=True)
class NoMatch:
    """The line was examined and did not satisfy the criteria."""


@dataclass(frozen=True)
class Skipped:
    """The line was suppressed as a join/part/quit notice."""


MatchOutcome = Union[ContentMatch, NickOnlyMatch, NoMatch, Skipped]

NO_MATCH = NoMatch()
SKIPPED = Skipped()
NICK_ONLY_MATCH = NickOnlyMatch()
