"""Match options for a chatgrep run.

:class:`MatchOptions` is immutable and validated on construction.  The
helper :func:`build_match_options` converts pydantic validation failures
into :class:`~chatgrep.exceptions.ConfigurationConflictError` so callers
only deal with chatgrep's own error types.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from chatgrep.exceptions import ConfigurationConflictError


class MatchOptions(BaseModel):
    """Immutable configuration for matching and printing log lines.

    Attributes:
        nickname: Exact speaker to select (compared after stripping a
            status prefix).  Empty means no nickname filter.
        pattern: Text to search for in messages.  Empty means no content
            filter.
        fixed: Treat *pattern* as a literal string instead of a regular
            expression.
        strip_joins: Skip join/part/quit notices entirely.
        strip_timestamps: Omit the timestamp field from printed lines.
        context: Lines of context to print before and after each match.
        count_only: Report per-file match counts instead of lines.
    """

    model_config = ConfigDict(frozen=True)

    nickname: str = ""
    pattern: str = ""
    fixed: bool = False
    strip_joins: bool = False
    strip_timestamps: bool = False
    context: int = Field(default=0, ge=0)
    count_only: bool = False

    @model_validator(mode="after")
    def _check_combinations(self) -> MatchOptions:
        if self.count_only and (
            self.strip_joins or self.strip_timestamps or self.context > 0
        ):
            raise ValueError("Can't combine --count with options affecting output")
        if not self.nickname and not self.pattern:
            raise ValueError("Must give either --pattern or --nickname")
        return self


def build_match_options(**fields: Any) -> MatchOptions:
    """Construct and validate a :class:`MatchOptions`.

    Args:
        **fields: Keyword arguments accepted by :class:`MatchOptions`.

    Returns:
        The validated options.

    Raises:
        ConfigurationConflictError: If the options are contradictory,
            no filter was given, or a field has an invalid value.
    """
    try:
        return MatchOptions(**fields)
    except ValidationError as exc:
        messages = "; ".join(_describe(err) for err in exc.errors())
        raise ConfigurationConflictError(messages) from exc


def _describe(error: Any) -> str:
    """Render one pydantic error entry without the ``Value error,`` prefix."""
    message = str(error.get("msg", ""))
    prefix = "Value error, "
    if message.startswith(prefix):
        message = message[len(prefix) :]
    location = ".".join(str(part) for part in error.get("loc", ()))
    return f"{location}: {message}" if location else message
