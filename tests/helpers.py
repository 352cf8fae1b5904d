"""Small builders shared by chatgrep tests."""

from __future__ import annotations


def log_line(speaker: str, message: str, timestamp: str = "2020-06-22 11:18:46") -> str:
    """Build a raw tab-delimited log line."""
    return f"{timestamp}\t{speaker}\t{message}"


OSSE_LINE = log_line(
    "osse",
    "check-ignore is for diagnosing .gitignore issues. "
    "it doesn't really have an effect on the repo",
)
