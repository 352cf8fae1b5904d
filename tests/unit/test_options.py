"""Unit tests for match option validation."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from chatgrep.exceptions import ConfigurationConflictError
from chatgrep.models.options import MatchOptions, build_match_options


class TestValidOptions:
    """Accepted combinations."""

    def test_defaults(self) -> None:
        """Only a filter is required; everything else defaults off."""
        options = build_match_options(nickname="osse")

        assert options.pattern == ""
        assert options.fixed is False
        assert options.strip_joins is False
        assert options.strip_timestamps is False
        assert options.context == 0
        assert options.count_only is False

    def test_pattern_only(self) -> None:
        """A pattern without nickname is enough."""
        assert build_match_options(pattern="re").pattern == "re"

    def test_count_with_filters(self) -> None:
        """--count with nickname, pattern and fixed is allowed."""
        options = build_match_options(
            nickname="osse", pattern="re", fixed=True, count_only=True
        )

        assert options.count_only is True

    def test_options_are_frozen(self) -> None:
        """Options cannot be changed after construction."""
        options = build_match_options(nickname="osse")

        with pytest.raises(ValidationError):
            options.context = 3  # type: ignore[misc]


class TestConflicts:
    """Rejected combinations raise ConfigurationConflictError."""

    def test_no_filter(self) -> None:
        """Neither nickname nor pattern is an error."""
        with pytest.raises(ConfigurationConflictError, match="--pattern or --nickname"):
            build_match_options()

    @pytest.mark.parametrize(
        "extra",
        [
            {"strip_joins": True},
            {"strip_timestamps": True},
            {"context": 1},
        ],
    )
    def test_count_with_output_options(self, extra: dict[str, object]) -> None:
        """--count cannot be combined with output-affecting options."""
        with pytest.raises(ConfigurationConflictError, match="Can't combine --count"):
            build_match_options(nickname="osse", count_only=True, **extra)

    def test_negative_context(self) -> None:
        """A negative context size is rejected and names the field."""
        with pytest.raises(ConfigurationConflictError, match="context"):
            build_match_options(nickname="osse", context=-1)

    def test_direct_construction_raises_validation_error(self) -> None:
        """Building MatchOptions directly surfaces pydantic's error."""
        with pytest.raises(ValidationError):
            MatchOptions()
