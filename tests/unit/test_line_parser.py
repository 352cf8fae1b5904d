"""Unit tests for the log line parser and the LogLine view."""

from __future__ import annotations

import pytest

from chatgrep.exceptions import MalformedLineError
from chatgrep.parser import parse_line
from tests.helpers import OSSE_LINE

# ---------------------------------------------------------------------------
# Field views
# ---------------------------------------------------------------------------


class TestFields:
    """The three fields are split on the first two tabs."""

    def test_parse_example_line(self) -> None:
        """Timestamp, speaker and message are sliced from the raw line."""
        line = parse_line(OSSE_LINE)

        assert line.timestamp == "2020-06-22 11:18:46"
        assert line.speaker == "osse"
        assert line.message.startswith("check-ignore is for")
        assert line.raw == OSSE_LINE

    def test_message_keeps_embedded_tabs(self) -> None:
        """Tabs after the second delimiter belong to the message."""
        line = parse_line("ts\tnick\tone\ttwo\tthree")

        assert line.message == "one\ttwo\tthree"

    def test_empty_fields_are_allowed(self) -> None:
        """Two bare tabs give three empty fields."""
        line = parse_line("\t\t")

        assert line.timestamp == ""
        assert line.speaker == ""
        assert line.message == ""

    def test_views_reconstruct_raw_line(self) -> None:
        """timestamp + TAB + raw speaker + TAB + message == raw line."""
        raw = "2021-01-01 00:00:00\t@op\thello\tworld"
        line = parse_line(raw)

        assert "\t".join([line.timestamp, line.raw_speaker, line.message]) == raw

    def test_without_timestamp(self) -> None:
        """without_timestamp drops the timestamp and first tab only."""
        line = parse_line("ts\t+voiced\thi there")

        assert line.without_timestamp == "+voiced\thi there"

    def test_offsets_point_at_tabs(self) -> None:
        """first_tab and second_tab index the delimiter characters."""
        line = parse_line("ab\tcd\tef")

        assert (line.first_tab, line.second_tab) == (2, 5)


# ---------------------------------------------------------------------------
# Speaker prefixes and join detection
# ---------------------------------------------------------------------------


class TestSpeaker:
    """Status prefixes are stripped and join notices recognised."""

    @pytest.mark.parametrize(
        ("raw_speaker", "expected"),
        [
            ("@osse", "osse"),
            ("+osse", "osse"),
            ("osse", "osse"),
            ("@@osse", "@osse"),
            ("@", ""),
        ],
    )
    def test_single_status_prefix_stripped(self, raw_speaker: str, expected: str) -> None:
        """Only one leading @ or + is removed."""
        line = parse_line(f"ts\t{raw_speaker}\tmsg")

        assert line.speaker == expected
        assert line.raw_speaker == raw_speaker

    @pytest.mark.parametrize("speaker", ["<--", "-->", "--"])
    def test_join_speakers(self, speaker: str) -> None:
        """Join, part and quit pseudo-speakers are detected."""
        assert parse_line(f"ts\t{speaker}\tosse has joined #git").is_join()

    @pytest.mark.parametrize("speaker", ["osse", "<-", "---", "-- ", "=!="])
    def test_regular_speakers_are_not_joins(self, speaker: str) -> None:
        """Anything but the exact pseudo-speakers is a regular line."""
        assert not parse_line(f"ts\t{speaker}\tmsg").is_join()

    def test_join_check_uses_stripped_speaker(self) -> None:
        """A status prefix is removed before the join comparison."""
        assert parse_line("ts\t@--\tmsg").is_join()


# ---------------------------------------------------------------------------
# Malformed lines
# ---------------------------------------------------------------------------


class TestMalformed:
    """Lines with fewer than two tabs are rejected."""

    @pytest.mark.parametrize("raw", ["", "no tabs at all", "ts\tonly one tab"])
    def test_missing_tabs_raise(self, raw: str) -> None:
        """Zero or one tab raises MalformedLineError."""
        with pytest.raises(MalformedLineError):
            parse_line(raw)

    def test_error_carries_location(self) -> None:
        """The error records the line, its number and its source."""
        with pytest.raises(MalformedLineError) as exc_info:
            parse_line("garbage", line_number=7, source="irc.x.#y.weechatlog")

        err = exc_info.value
        assert err.raw_line == "garbage"
        assert err.line_number == 7
        assert err.source == "irc.x.#y.weechatlog"
        assert str(err).startswith("irc.x.#y.weechatlog:7: ")

    def test_error_without_line_number(self) -> None:
        """Without a line number the message is not prefixed."""
        with pytest.raises(MalformedLineError, match="^Malformed log line"):
            parse_line("garbage")
