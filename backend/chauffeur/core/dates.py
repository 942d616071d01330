"""Calendar-day helpers shared by the availability services."""

from __future__ import annotations

import calendar
from collections.abc import Iterator
from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo

from chauffeur.core.config import get_settings


def calendar_zone() -> ZoneInfo:
    """Return the zone that defines calendar days for the fleet."""
    return ZoneInfo(get_settings().calendar_timezone)


def today() -> date:
    """Return the current calendar day in the fleet's zone."""
    return datetime.now(calendar_zone()).date()


def normalize_day(value: date | datetime) -> date:
    """Reduce a date or datetime to its calendar day.

    Naive datetimes are taken as already local to the fleet; aware ones are
    converted to the fleet's zone first so a late-evening UTC timestamp lands
    on the right local day.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(calendar_zone())
        return value.date()
    return value


def day_key(day: date) -> str:
    """Format a calendar day as ``YYYY-MM-DD``."""
    return day.isoformat()


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """Return the first and last day of a month, both inclusive."""
    if not 1 <= month <= 12:
        raise ValueError("month must be between 1 and 12")
    last = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last)


def iter_days(first: date, last: date) -> Iterator[date]:
    """Yield every day from ``first`` through ``last`` inclusive."""
    for offset in range((last - first).days + 1):
        yield first + timedelta(days=offset)


__all__ = [
    "calendar_zone",
    "day_key",
    "iter_days",
    "month_bounds",
    "normalize_day",
    "today",
]
