from datetime import datetime, timezone

from coffee_bot.utils.time import format_ready_time


def test_format_ready_time_twelve_hour_clock():
    assert format_ready_time(datetime(2024, 1, 1, 13, 30, tzinfo=timezone.utc)) == "1:30 PM"
    assert format_ready_time(datetime(2024, 1, 1, 9, 5, tzinfo=timezone.utc)) == "9:05 AM"


def test_format_ready_time_naive_is_utc():
    assert format_ready_time(datetime(2024, 1, 1, 0, 5)) == "12:05 AM"


def test_format_ready_time_converts_timezone():
    dt = datetime(2024, 1, 1, 13, 30, tzinfo=timezone.utc)
    assert format_ready_time(dt, "America/New_York") == "8:30 AM"
