from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta
from typing import Union

from ..core.exceptions import ValidationError

DateLike = Union[date, datetime, str]


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value.strip(), "%Y-%m-%d").date()
    except ValueError as exc:
        raise ValidationError(f"Invalid ISO date: {value!r}") from exc


def coerce_date(value: DateLike) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return parse_iso_date(value)
    raise TypeError(f"Unsupported date value type: {type(value)!r}")


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now().date()


def _require_month(month: int) -> int:
    if not 1 <= int(month) <= 12:
        raise ValidationError(f"Month must be between 1 and 12, got {month}")
    return int(month)


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(int(year), _require_month(month))[1]


def month_start(year: int, month: int) -> date:
    return date(int(year), _require_month(month), 1)


def month_end(year: int, month: int) -> date:
    return date(int(year), _require_month(month), days_in_month(year, month))


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """First and last calendar day of a pay period."""
    return month_start(year, month), month_end(year, month)


def days_inclusive(start: date, end: date) -> int:
    if start > end:
        return 0
    return (end - start).days + 1


def add_months(value: DateLike, months: int) -> date:
    """Shift by whole months, clamping the day to the target month's end.

    2024-01-31 + 1 month -> 2024-02-29.
    """
    d = coerce_date(value)
    index = d.year * 12 + (d.month - 1) + int(months)
    year, month0 = divmod(index, 12)
    month = month0 + 1
    return date(year, month, min(d.day, days_in_month(year, month)))


def months_elapsed(start: DateLike, end: DateLike) -> int:
    """Calendar-month distance between two dates, ignoring the day of month."""
    s = coerce_date(start)
    e = coerce_date(end)
    return (e.year - s.year) * 12 + (e.month - s.month)


def next_month_start(value: DateLike) -> date:
    d = coerce_date(value)
    return add_months(date(d.year, d.month, 1), 1)


def iter_dates(start: date, end: date):
    """Yield every date in [start, end]."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)
