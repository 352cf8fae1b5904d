"""Search orchestration across log files.

:func:`run_search` processes files strictly one after another, in the
order given.  Each file gets a fresh context window.  In line mode the
matching lines and their context are written to *out*; in count mode a
``name:count`` summary is written per file.

Files are read as bytes and split on ``\\n`` only, so a stray ``\\r``
inside a message stays part of it.  Lines that are not valid UTF-8 are
skipped with a warning.

A malformed line aborts the run by propagating
:class:`~chatgrep.exceptions.MalformedLineError`.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

from chatgrep.engine import MatchedLine, count_lines, stream_lines
from chatgrep.matcher import LineMatcher
from chatgrep.output import format_count, format_record, write_line

logger = logging.getLogger(__name__)


@dataclass
class SearchResult:
    """Summary of a :func:`run_search` call.

    Attributes:
        files_searched: Files processed, in order.
        matches: Matched lines (line mode) or match totals (count mode)
            keyed by file path.
    """

    files_searched: list[Path] = field(default_factory=list)
    matches: dict[str, int] = field(default_factory=dict)

    @property
    def total_matches(self) -> int:
        return sum(self.matches.values())


def run_search(
    matcher: LineMatcher,
    files: Iterable[str | Path],
    out: TextIO | None = None,
    color: bool = False,
) -> SearchResult:
    """Search *files* with *matcher*, writing results to *out*.

    Args:
        matcher: Classifier built from the validated match options.  Build
            it before resolving files so an invalid pattern is reported
            first.
        files: Log files to read, in processing order.
        out: Destination stream.  Defaults to ``sys.stdout``.
        color: Emit ANSI highlighting.

    Returns:
        A :class:`SearchResult` summarising the run.

    Raises:
        MalformedLineError: If a file contains a malformed line.
        OSError: If a file cannot be opened or read.
    """
    stream = out if out is not None else sys.stdout
    options = matcher.options
    result = SearchResult()

    for file in files:
        path = Path(file)
        logger.debug("Processing %s", path)

        with path.open("rb") as handle:
            if options.count_only:
                count = count_lines(matcher, handle, source=str(path))
                write_line(stream, format_count(path.name, count, color=color))
            else:
                count = 0
                for record in stream_lines(matcher, handle, source=str(path)):
                    if isinstance(record, MatchedLine):
                        count += 1
                    write_line(
                        stream,
                        format_record(
                            record,
                            strip_timestamps=options.strip_timestamps,
                            color=color,
                        ),
                    )

        logger.debug("%s: %d match(es)", path.name, count)
        result.files_searched.append(path)
        result.matches[str(path)] = count

    logger.info(
        "Searched %d file(s), %d match(es)",
        len(result.files_searched),
        result.total_matches,
    )
    return result
