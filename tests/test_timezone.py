"""
Tests for timezone utilities.
"""

import pytest
from datetime import datetime, timedelta
import pytz

from models.errors import ParseError
from validators.timezone_utils import (
    offset_to_minutes,
    parse_clock_time,
    parse_session_date,
    resolve_session_time,
)


def test_offset_to_minutes():
    assert offset_to_minutes("+05:00") == 300
    assert offset_to_minutes("-03:30") == -210
    assert offset_to_minutes("+00:00") == 0


@pytest.mark.parametrize("bad", ["5", "+5:00", "05:00", "+05", ""])
def test_offset_to_minutes_rejects_non_canonical(bad):
    with pytest.raises(ParseError):
        offset_to_minutes(bad)


def test_resolve_session_time_shifts_to_utc():
    """Local 14:00 at +05:00 is 09:00 UTC."""
    result = resolve_session_time("23 Feb 2024", "14:00", "+05:00")
    assert result == datetime(2024, 2, 23, 9, 0, tzinfo=pytz.utc)
    assert result.utcoffset() == timedelta(0)


def test_resolve_session_time_sign_flip():
    """Flipping the offset sign moves the instant by twice the offset."""
    plus = resolve_session_time("23 Feb 2024", "14:00", "+05:00")
    minus = resolve_session_time("23 Feb 2024", "14:00", "-05:00")
    assert minus - plus == timedelta(hours=10)


def test_resolve_session_time_crosses_midnight():
    result = resolve_session_time("10 Mar 2024", "02:00", "+11:00")
    assert result == datetime(2024, 3, 9, 15, 0, tzinfo=pytz.utc)


def test_resolve_session_time_uses_season_for_yearless_dates():
    result = resolve_session_time("Fri 23 Feb", "14:00", "+05:00", season=2024)
    assert result == datetime(2024, 2, 23, 9, 0, tzinfo=pytz.utc)


def test_resolve_session_time_ignores_host_timezone(monkeypatch):
    import time
    if not hasattr(time, "tzset"):
        pytest.skip("tzset not available")

    monkeypatch.setenv("TZ", "America/Los_Angeles")
    time.tzset()
    try:
        result = resolve_session_time("23 Feb 2024", "14:00", "+05:00")
    finally:
        monkeypatch.delenv("TZ")
        time.tzset()
    assert result == datetime(2024, 2, 23, 9, 0, tzinfo=pytz.utc)


@pytest.mark.parametrize("date,start", [
    ("TBC", "14:00"),
    ("", "14:00"),
    ("31 Feb 2024", "14:00"),
    ("23 Feb 2024", "2pm"),
    ("23 Feb 2024", "25:00"),
    ("23 Feb 2024", ""),
])
def test_resolve_session_time_parse_errors(date, start):
    with pytest.raises(ParseError):
        resolve_session_time(date, start, "+05:00")


def test_parse_clock_time():
    assert parse_clock_time("09:45").hour == 9
    assert parse_clock_time(" 9:45 ").minute == 45


def test_parse_session_date_weekday_label():
    assert parse_session_date("Sun 25 Feb", season=2024).day == 25
