"""Log file discovery.

weechat writes one log per buffer, named
``irc.<network>.<channel>.weechatlog``.  :func:`find_log_files` selects
the files for a network and channel (both regular expressions) and
returns them in lexicographic order.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from chatgrep.exceptions import InvalidPatternError

logger = logging.getLogger(__name__)

LOG_SUFFIX = ".weechatlog"


def build_file_pattern(network: str = ".*", channel: str = ".*") -> re.Pattern[str]:
    """Compile the file-name pattern for *network* and *channel*.

    Leading ``#`` characters of the channel name are optional.

    Raises:
        InvalidPatternError: If the combined expression does not compile.
    """
    text = rf"^irc\.{network}\.#*{channel}\.weechatlog$"
    try:
        return re.compile(text)
    except re.error as exc:
        raise InvalidPatternError(
            f"Invalid network/channel pattern {text!r}: {exc}", pattern=text
        ) from exc


def find_log_files(
    log_dir: str | Path,
    network: str = ".*",
    channel: str = ".*",
) -> list[Path]:
    """Return the sorted log files in *log_dir* matching network/channel.

    Args:
        log_dir: Directory holding weechat log files.
        network: Regular expression for the network name.
        channel: Regular expression for the channel name, without ``#``.

    Returns:
        Matching file paths, sorted.  May be empty.

    Raises:
        FileNotFoundError: If *log_dir* does not exist.
        NotADirectoryError: If *log_dir* is not a directory.
        InvalidPatternError: If *network* or *channel* is not a valid
            regular expression.
    """
    path = Path(log_dir)
    if not path.exists():
        raise FileNotFoundError(f"Log directory not found: {path}")
    if not path.is_dir():
        raise NotADirectoryError(f"Not a directory: {path}")

    file_pattern = build_file_pattern(network, channel)

    files = sorted(
        entry
        for entry in path.iterdir()
        if entry.is_file()
        and entry.suffix == LOG_SUFFIX
        and file_pattern.match(entry.name)
    )

    logger.debug("Found %d log file(s) in %s", len(files), path)
    if not files:
        logger.warning(
            "No log files in %s match network=%r channel=%r", path, network, channel
        )
    return files
