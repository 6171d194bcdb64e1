"""Tests for duration extraction in timeout_checker/durations.py."""

from __future__ import annotations

from datetime import timedelta

import pytest

from timeout_checker.durations import (
    extract_duration,
    format_duration,
    parse_duration_token,
)


class TestExtractDuration:
    """Tests for extract_duration()."""

    @pytest.mark.parametrize("line,expected", [
        ("Create: schema.DefaultTimeout(30 * time.Minute),", timedelta(minutes=30)),
        ("Delete: schema.DefaultTimeout(2 * time.Hour),", timedelta(hours=2)),
        ("* `create` - (Default `30 minutes`)", timedelta(minutes=30)),
        ("* `delete` - (Defaults to 2 hours) Used when deleting.", timedelta(hours=2)),
        ("* `read` - (Defaults to 1 hour)", timedelta(hours=1)),
        ("* `update` - (Defaults to 45 MINUTES)", timedelta(minutes=45)),
        ("Update: 10 HoUrS", timedelta(hours=10)),
    ])
    def test_recognized_durations(self, line, expected):
        """Digits followed by an hour/minute word parse in any case."""
        assert extract_duration(line) == expected

    def test_first_digits_and_first_unit_win(self):
        """Only the first digit run and the first unit after it count."""
        assert extract_duration("10 hours, or 20 minutes") == timedelta(hours=10)
        assert extract_duration("1 then 2 minutes") == timedelta(minutes=1)

    def test_unit_needs_to_follow_digits(self):
        """A unit word before the only digits is not a duration."""
        assert extract_duration("minutes: 15") == timedelta()

    @pytest.mark.parametrize("line", [
        "Read: schema.DefaultTimeout(defaultReadTimeout),",
        "Create: schema.DefaultTimeout(30 * time.Second),",
        "* `create` - (Defaults to a while)",
        "",
        "no numbers here, only minutes",
    ])
    def test_unrecognized_lines_are_zero(self, line):
        """Lines without digits-then-unit yield a zero duration."""
        assert extract_duration(line) == timedelta()

    def test_non_ascii_digits_are_not_digits(self):
        """Only ASCII 0-9 count, so Arabic-Indic digits yield zero."""
        assert extract_duration("Create: \u0663\u0660 minutes") == timedelta()
        assert extract_duration("Read: \u0663\u0660 or 5 minutes") == timedelta(minutes=5)

    def test_out_of_range_value_is_zero(self):
        """Values timedelta cannot hold are treated as not declared."""
        assert extract_duration("99999999999999999999 hours") == timedelta()


class TestParseDurationToken:
    """Tests for parse_duration_token()."""

    def test_minutes(self):
        assert parse_duration_token("30m") == timedelta(minutes=30)

    def test_hours(self):
        assert parse_duration_token("2h") == timedelta(hours=2)

    @pytest.mark.parametrize("token", ["", "30", "m", "30s", "1.5h", "-2h"])
    def test_malformed_token_raises(self, token):
        with pytest.raises(ValueError, match="invalid duration token"):
            parse_duration_token(token)

    def test_overflow_raises_value_error(self):
        with pytest.raises(ValueError, match="out of range"):
            parse_duration_token("99999999999999999999h")


class TestFormatDuration:
    """Tests for format_duration()."""

    @pytest.mark.parametrize("duration,expected", [
        (timedelta(), "0s"),
        (timedelta(seconds=45), "45s"),
        (timedelta(minutes=30), "30m0s"),
        (timedelta(minutes=90), "1h30m0s"),
        (timedelta(hours=2), "2h0m0s"),
        (timedelta(hours=48), "48h0m0s"),
    ])
    def test_go_style_rendering(self, duration, expected):
        """Durations print like Go's time.Duration.String()."""
        assert format_duration(duration) == expected
