from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo

from fitcoach.core.config import settings


class InvalidDateError(ValueError):
    pass


@dataclass(frozen=True)
class Period:
    """Inclusive whole-day window, both bounds timezone-aware."""

    start: datetime
    end: datetime

    @property
    def start_day(self) -> date:
        return self.start.date()

    @property
    def end_day(self) -> date:
        return self.end.date()

    @property
    def is_inverted(self) -> bool:
        return self.start > self.end

    def day_count(self) -> int:
        return (self.end_day - self.start_day).days + 1

    def as_utc_naive(self) -> tuple[datetime, datetime]:
        # timestamp columns hold naive UTC values
        return (
            self.start.astimezone(timezone.utc).replace(tzinfo=None),
            self.end.astimezone(timezone.utc).replace(tzinfo=None),
        )


def local_timezone() -> tzinfo:
    if settings.TIMEZONE.upper() == "UTC":
        return timezone.utc
    return ZoneInfo(settings.TIMEZONE)


def parse_day(value: str, tz: tzinfo | None = None) -> date:
    """
    Parse "YYYY-MM-DD" or a full ISO-8601 instant into a calendar date.

    Instants carrying an offset are converted to `tz` first, so
    "2025-01-10T23:30:00Z" is the 11th for a UTC+1 caller.
    """
    if not value or not isinstance(value, str):
        raise InvalidDateError(f"Invalid date: {value!r}")

    raw = value.strip()
    try:
        if len(raw) == 10:
            return date.fromisoformat(raw)
        if raw.endswith("Z"):
            raw = raw[:-1] + "+00:00"
        dt = datetime.fromisoformat(raw)
    except ValueError as e:
        raise InvalidDateError(
            f"Invalid date format: {value}, expected YYYY-MM-DD"
        ) from e

    if dt.tzinfo is not None and tz is not None:
        dt = dt.astimezone(tz)
    return dt.date()


def resolve_range(
    raw_from: str | None,
    raw_to: str | None,
    default_span_days: int,
    now: datetime | None = None,
    tz: tzinfo | None = None,
) -> Period:
    """
    Turn optional from/to strings into an inclusive [start, end] window.

    A missing `to` means the day of `now`; a missing `from` means
    `default_span_days` days ending on `to`. Start is snapped to local midnight
    and end to the last microsecond of its day. Inverted input is passed
    through unchanged.
    """
    tz = tz or local_timezone()

    if now is None:
        now = datetime.now(tz)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=tz)
    else:
        now = now.astimezone(tz)

    end_day = parse_day(raw_to, tz) if raw_to else now.date()
    if raw_from:
        start_day = parse_day(raw_from, tz)
    else:
        start_day = end_day - timedelta(days=default_span_days - 1)

    return Period(
        start=datetime.combine(start_day, time.min, tzinfo=tz),
        end=datetime.combine(end_day, time.max, tzinfo=tz),
    )


def parse_instant(value: str) -> datetime:
    """
    Parse a client-supplied timestamp into a naive UTC datetime.

    "YYYY-MM-DD" is midnight UTC of that day; naive datetimes are taken as UTC.
    """
    if not value or not isinstance(value, str):
        raise InvalidDateError(f"Invalid date: {value!r}")

    raw = value.strip()
    try:
        if len(raw) == 10:
            return datetime.combine(date.fromisoformat(raw), time.min)
        if raw.endswith("Z"):
            raw = raw[:-1] + "+00:00"
        dt = datetime.fromisoformat(raw)
    except ValueError as e:
        raise InvalidDateError(
            f"Invalid date format: {value}, expected YYYY-MM-DD or ISO-8601"
        ) from e

    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc).replace(tzinfo=None)
    return dt


def open_range(
    raw_from: str | None,
    raw_to: str | None,
    tz: tzinfo | None = None,
) -> tuple[datetime | None, datetime | None]:
    """Whole-day naive UTC bounds for optional list filters; None means unbounded."""
    tz = tz or local_timezone()
    start = end = None
    if raw_from:
        start = datetime.combine(parse_day(raw_from, tz), time.min, tzinfo=tz)
        start = start.astimezone(timezone.utc).replace(tzinfo=None)
    if raw_to:
        end = datetime.combine(parse_day(raw_to, tz), time.max, tzinfo=tz)
        end = end.astimezone(timezone.utc).replace(tzinfo=None)
    return start, end
