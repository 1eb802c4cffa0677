"""
Tests for timestamp parsing and duration calculation.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from app.application.utils.time_utils import duration_minutes, format_instant, parse_instant


def test_duration_of_45_minutes():
    """A 45 minute booking reports 45."""
    assert duration_minutes("2024-01-01T10:00:00Z", "2024-01-01T10:45:00Z") == 45


def test_duration_invalid_input_is_none():
    """Unparsable timestamps give None instead of raising."""
    assert duration_minutes("invalid", "2024-01-01T10:00:00Z") is None
    assert duration_minutes("2024-01-01T10:00:00Z", "") is None
    assert duration_minutes(None, "2024-01-01T10:00:00Z") is None


def test_duration_negative_is_preserved():
    """End before start is passed through as a negative duration."""
    assert duration_minutes("2024-01-01T11:00:00Z", "2024-01-01T10:30:00Z") == -30


def test_duration_rounds_half_up():
    """Durations are rounded to the nearest minute, halves upward."""
    assert duration_minutes("2024-01-01T10:00:00Z", "2024-01-01T10:00:30Z") == 1
    assert duration_minutes("2024-01-01T10:00:00Z", "2024-01-01T10:00:29Z") == 0
    assert duration_minutes("2024-01-01T10:00:00Z", "2024-01-01T10:29:40Z") == 30


def test_duration_across_offsets():
    """Timestamps with different offsets compare as absolute instants."""
    assert duration_minutes("2024-01-01T10:00:00+01:00", "2024-01-01T09:30:00Z") == 30


def test_parse_instant_variants():
    """Z suffix, offsets, fractional seconds and naive values all parse."""
    expected = datetime(2024, 1, 1, 10, 0, tzinfo=timezone.utc)
    assert parse_instant("2024-01-01T10:00:00Z") == expected
    assert parse_instant("2024-01-01T10:00:00.000Z") == expected
    assert parse_instant("2024-01-01T12:00:00+02:00") == expected
    assert parse_instant("2024-01-01T10:00:00") == expected
    assert parse_instant("not a date") is None
    assert parse_instant("   ") is None
    assert parse_instant(12345) is None


def test_format_instant_uses_utc_millis():
    """Synthesized timestamps look like the platform's UTC strings."""
    moment = datetime(2024, 1, 1, 12, 0, 5, 123456, tzinfo=timezone(timedelta(hours=2)))
    assert format_instant(moment) == "2024-01-01T10:00:05.123Z"
    assert parse_instant(format_instant(moment)) == moment.replace(microsecond=123000)
