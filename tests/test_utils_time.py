"""Tests for texture_results.utils.time module."""

from __future__ import annotations

from datetime import date, datetime, timezone

from texture_results.utils.time import (
    local_midnight,
    local_today,
    parse_iso8601,
    to_epoch_ms,
)


class TestLocalDates:
    def test_local_today_matches_now(self) -> None:
        assert local_today() == datetime.now().date()

    def test_local_midnight_is_aware_start_of_day(self) -> None:
        result = local_midnight(date(2024, 1, 15))

        assert result.tzinfo is not None
        assert (result.year, result.month, result.day) == (2024, 1, 15)
        assert (result.hour, result.minute, result.second) == (0, 0, 0)


class TestParseIso8601:
    """Tests for parse_iso8601 function."""

    def test_parses_z_suffix(self) -> None:
        result = parse_iso8601("2024-01-15T10:30:00.000000Z")

        assert result == datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)

    def test_normalizes_offset_to_utc(self) -> None:
        result = parse_iso8601("2024-01-15T12:30:00+02:00")

        assert result == datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)
        assert result.tzinfo == timezone.utc

    def test_returns_none_for_empty(self) -> None:
        assert parse_iso8601(None) is None
        assert parse_iso8601("") is None


class TestToEpochMs:
    def test_known_value(self) -> None:
        dt = datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc)

        assert to_epoch_ms(dt) == 1700000000000

    def test_keeps_milliseconds(self) -> None:
        dt = datetime(2023, 11, 14, 22, 13, 20, 123000, tzinfo=timezone.utc)

        assert to_epoch_ms(dt) == 1700000000123
