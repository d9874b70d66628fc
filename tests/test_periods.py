from datetime import date, datetime, time, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from fitcoach.core.periods import (
    InvalidDateError,
    open_range,
    parse_day,
    parse_instant,
    resolve_range,
)

UTC = timezone.utc
NOW = datetime(2026, 10, 19, 15, 42, 7, tzinfo=UTC)


def test_default_weekly_window():
    period = resolve_range(None, None, 7, now=NOW, tz=UTC)

    assert period.start == datetime(2026, 10, 13, 0, 0, tzinfo=UTC)
    assert period.end == datetime(2026, 10, 19, 23, 59, 59, 999999, tzinfo=UTC)
    assert period.end_day == NOW.date()
    assert period.day_count() == 7


def test_default_overview_window():
    period = resolve_range(None, None, 30, now=NOW, tz=UTC)

    assert period.start_day == date(2026, 9, 20)
    assert period.end_day == date(2026, 10, 19)
    assert period.day_count() == 30


def test_explicit_bounds_are_snapped_to_whole_days():
    period = resolve_range("2025-01-05T13:00:00Z", "2025-01-07T08:15:00Z", 7, now=NOW, tz=UTC)

    assert period.start == datetime(2025, 1, 5, tzinfo=UTC)
    assert period.end.time() == time.max
    assert period.end_day == date(2025, 1, 7)


def test_only_to_counts_back_from_it():
    period = resolve_range(None, "2025-03-10", 7, now=NOW, tz=UTC)
    assert period.start_day == date(2025, 3, 4)
    assert period.end_day == date(2025, 3, 10)


def test_only_from_ends_today():
    period = resolve_range("2026-10-01", None, 7, now=NOW, tz=UTC)
    assert period.start_day == date(2026, 10, 1)
    assert period.end_day == date(2026, 10, 19)


def test_inverted_range_is_passed_through():
    period = resolve_range("2025-02-10", "2025-02-01", 7, now=NOW, tz=UTC)
    assert period.is_inverted


def test_local_timezone_snapping():
    tz = ZoneInfo("Europe/Budapest")
    # 23:30 UTC on the 19th is already the 20th in Budapest
    now = datetime(2026, 10, 19, 23, 30, tzinfo=UTC)
    period = resolve_range(None, None, 7, now=now, tz=tz)

    assert period.end_day == date(2026, 10, 20)
    assert period.start == datetime(2026, 10, 14, tzinfo=tz)

    start, end = period.as_utc_naive()
    assert start == datetime(2026, 10, 13, 22, 0)
    assert end.tzinfo is None


def test_naive_now_is_taken_as_local():
    period = resolve_range(None, None, 1, now=datetime(2026, 1, 1, 12, 0), tz=UTC)
    assert period.start_day == period.end_day == date(2026, 1, 1)


def test_parse_day_formats():
    assert parse_day("2025-01-10") == date(2025, 1, 10)
    assert parse_day("2025-01-10T23:30:00Z") == date(2025, 1, 10)
    assert parse_day("2025-01-10T23:30:00Z", ZoneInfo("Europe/Budapest")) == date(2025, 1, 11)


@pytest.mark.parametrize("value", ["", "yesterday", "2025-13-01", "2025-02-30"])
def test_parse_day_rejects_garbage(value):
    with pytest.raises(InvalidDateError):
        parse_day(value)


def test_parse_instant():
    assert parse_instant("2025-01-10") == datetime(2025, 1, 10)
    assert parse_instant("2025-01-10T10:00:00+02:00") == datetime(2025, 1, 10, 8, 0)
    assert parse_instant("2025-01-10T10:00:00") == datetime(2025, 1, 10, 10, 0)
    with pytest.raises(InvalidDateError):
        parse_instant("10/01/2025")


def test_open_range():
    assert open_range(None, None, UTC) == (None, None)

    start, end = open_range("2025-01-01", "2025-01-31", UTC)
    assert start == datetime(2025, 1, 1)
    assert end == datetime(2025, 1, 31, 23, 59, 59, 999999)

    start, end = open_range(None, "2025-01-31", UTC)
    assert start is None
    assert end - datetime(2025, 1, 31) < timedelta(days=1)
