"""Working-day and leave-balance arithmetic (Qatar: Friday/Saturday weekend)."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Iterable, Optional, Sequence

from ..common.datetime_utils import DateLike, coerce_date, days_inclusive, iter_dates, today_local
from ..common.money import ZERO, DecimalLike, to_decimal
from ..core.constants import DEFAULT_WEEKEND_DAYS, HALF_DAY
from ..core.enums import LeaveRequestType
from .model import PublicHoliday


def is_weekend(day: DateLike, weekend_days: Sequence[int] = DEFAULT_WEEKEND_DAYS) -> bool:
    return coerce_date(day).weekday() in weekend_days


def calculate_calendar_days(start: DateLike, end: DateLike) -> int:
    return days_inclusive(coerce_date(start), coerce_date(end))


def calculate_working_days(
    start: DateLike,
    end: DateLike,
    request_type: LeaveRequestType = LeaveRequestType.FULL_DAY,
    *,
    include_weekends: bool = False,
    weekend_days: Sequence[int] = DEFAULT_WEEKEND_DAYS,
) -> Decimal:
    return calculate_working_days_with_holidays(
        start,
        end,
        request_type,
        include_weekends=include_weekends,
        weekend_days=weekend_days,
        holidays=(),
    )


def calculate_working_days_with_holidays(
    start: DateLike,
    end: DateLike,
    request_type: LeaveRequestType = LeaveRequestType.FULL_DAY,
    *,
    include_weekends: bool = False,
    weekend_days: Sequence[int] = DEFAULT_WEEKEND_DAYS,
    holidays: Iterable[PublicHoliday] = (),
) -> Decimal:
    """Leave days a request consumes.

    Half-day requests are worth 0.5 only on a single working day; a half day
    on a weekend or holiday earns no credit.
    """

    start_d = coerce_date(start)
    end_d = coerce_date(end)
    holidays = tuple(holidays)

    def counts(day: date) -> bool:
        if not include_weekends and day.weekday() in weekend_days:
            return False
        return is_public_holiday(day, holidays) is None

    if LeaveRequestType(request_type).is_half_day:
        if start_d != end_d or not counts(start_d):
            return ZERO
        return HALF_DAY

    return Decimal(sum(1 for day in iter_dates(start_d, end_d) if counts(day)))


def is_public_holiday(day: DateLike, holidays: Iterable[PublicHoliday]) -> Optional[str]:
    d = coerce_date(day)
    for holiday in holidays:
        if holiday.covers(d):
            return holiday.name
    return None


def get_holidays_in_range(start: DateLike, end: DateLike, holidays: Iterable[PublicHoliday]) -> list[str]:
    """Unique holiday names touching [start, end], in input order."""

    start_d = coerce_date(start)
    end_d = coerce_date(end)
    names: list[str] = []
    for holiday in holidays:
        if dates_overlap(holiday.start_date, holiday.end_date, start_d, end_d) and holiday.name not in names:
            names.append(holiday.name)
    return names


def calculate_remaining_balance(
    entitlement: DecimalLike,
    used: DecimalLike,
    pending: DecimalLike,
    carried_forward: DecimalLike,
    adjustment: DecimalLike,
) -> Decimal:
    """entitlement + carried forward + adjustment - used - pending."""

    return (
        to_decimal(entitlement)
        + to_decimal(carried_forward)
        + to_decimal(adjustment)
        - to_decimal(used)
        - to_decimal(pending)
    )


def calculate_available_balance(
    entitlement: DecimalLike,
    used: DecimalLike,
    carried_forward: DecimalLike,
    adjustment: DecimalLike,
) -> Decimal:
    return calculate_remaining_balance(entitlement, used, ZERO, carried_forward, adjustment)


def dates_overlap(start_a: DateLike, end_a: DateLike, start_b: DateLike, end_b: DateLike) -> bool:
    """Inclusive: ranges that only touch on one day still overlap."""
    return coerce_date(start_a) <= coerce_date(end_b) and coerce_date(start_b) <= coerce_date(end_a)


def format_leave_days(days: DecimalLike) -> str:
    value = to_decimal(days)
    if value == HALF_DAY:
        return "Half day"
    if value == 1:
        return "1 day"
    return f"{value.normalize():f} days"


def exceeds_max_consecutive_days(total_days: DecimalLike, max_consecutive_days: Optional[int]) -> bool:
    if max_consecutive_days is None:
        return False
    return to_decimal(total_days) > max_consecutive_days


def meets_notice_days_requirement(start: DateLike, min_notice_days: int, *, today: Optional[date] = None) -> bool:
    if min_notice_days == 0:
        return True
    today = today or today_local()
    return (coerce_date(start) - today).days >= min_notice_days
