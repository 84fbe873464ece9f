"""Common types and helpers shared across models."""

import calendar
import math
from collections.abc import Iterator
from datetime import UTC, date, datetime, timedelta
from typing import TypeAlias

DateStr: TypeAlias = str  # YYYY-MM-DD

MINUTES_PER_DAY = 1440


def utc_now() -> datetime:
    return datetime.now(UTC)


def local_now() -> datetime:
    """Current wall-clock time as an aware datetime in the host timezone."""
    return datetime.now().astimezone()


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties toward positive infinity."""
    return math.floor(value + 0.5)


def to_date_str(d: date) -> DateStr:
    return d.strftime("%Y-%m-%d")


def parse_date_str(s: DateStr) -> date:
    return date.fromisoformat(s)


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """First and last calendar day of a month."""
    return date(year, month, 1), date(year, month, days_in_month(year, month))


def iter_dates(start: date, end: date) -> Iterator[date]:
    """Yield every date from start to end inclusive."""
    cur = start
    while cur <= end:
        yield cur
        cur += timedelta(days=1)
