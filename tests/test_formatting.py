# tests/test_formatting.py
"""Unit tests for the visit time display helpers."""

from datetime import datetime, timedelta, timezone
from app.utils.formatting import format_time, format_duration


class TestFormatTime:
    def test_naive_utc_shown_in_nairobi(self):
        assert format_time(datetime(2026, 2, 20, 11, 5)) == "20 Feb, 14:05"

    def test_aware_timestamp_converted(self):
        ts = datetime(2026, 2, 20, 23, 30, tzinfo=timezone.utc)
        assert format_time(ts) == "21 Feb, 02:30"

    def test_explicit_timezone(self):
        assert format_time(datetime(2026, 2, 20, 11, 5), "UTC") == "20 Feb, 11:05"

    def test_missing_timestamp_placeholder(self):
        assert format_time(None) == "-"


class TestFormatDuration:
    def test_hours_and_minutes(self):
        t_in = datetime(2026, 2, 20, 8, 0)
        assert format_duration(t_in, t_in + timedelta(hours=2, minutes=35, seconds=59)) == "2h 35m"

    def test_under_a_minute(self):
        t_in = datetime(2026, 2, 20, 8, 0)
        assert format_duration(t_in, t_in + timedelta(seconds=30)) == "0h 0m"

    def test_multi_day_visit(self):
        t_in = datetime(2026, 2, 20, 8, 0)
        assert format_duration(t_in, t_in + timedelta(days=1, minutes=1)) == "24h 1m"

    def test_missing_side_placeholder(self):
        assert format_duration(datetime(2026, 2, 20), None) == "-"
        assert format_duration(None, datetime(2026, 2, 20)) == "-"

    def test_negative_interval_clamped(self):
        t_in = datetime(2026, 2, 20, 8, 0)
        assert format_duration(t_in, t_in - timedelta(minutes=5)) == "0h 0m"
