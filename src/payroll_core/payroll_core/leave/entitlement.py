"""Service-length rules from the Qatar Labor Law.

- Annual leave: 21 days a year, 28 after five years, accrued monthly from
  the first month of employment.
- Sick leave: first 14 days on full pay, next 28 on half pay, last 42 unpaid.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Mapping, Optional, Sequence

from ..common.datetime_utils import DateLike, coerce_date, today_local
from ..common.money import ZERO, DecimalLike, round_money, to_decimal
from ..core.constants import (
    DEFAULT_ANNUAL_ENTITLEMENT,
    DEFAULT_ANNUAL_LEAVE_TIERS,
    SENIOR_ANNUAL_ENTITLEMENT,
    SENIOR_SERVICE_MONTHS,
)
from .model import AnnualLeaveDetails, PayTier, SickLeavePayBreakdown

DEFAULT_SICK_LEAVE_TIERS: tuple[PayTier, ...] = (
    PayTier(days=14, pay_percent=100, label="Full Pay"),
    PayTier(days=28, pay_percent=50, label="Half Pay"),
    PayTier(days=42, pay_percent=0, label="Unpaid"),
)


def calculate_service_months(date_of_joining: DateLike, reference_date: Optional[DateLike] = None) -> int:
    """Complete months of service; a month only counts once its day is reached."""

    join = coerce_date(date_of_joining)
    ref = coerce_date(reference_date) if reference_date is not None else today_local()
    if ref < join:
        return 0

    months = (ref.year - join.year) * 12 + (ref.month - join.month)
    if ref.day < join.day:
        months -= 1
    return max(0, months)


def calculate_service_years(date_of_joining: DateLike, reference_date: Optional[DateLike] = None) -> int:
    return calculate_service_months(date_of_joining, reference_date) // 12


def meets_service_requirement(
    date_of_joining: Optional[DateLike],
    minimum_service_months: int,
    reference_date: Optional[DateLike] = None,
) -> bool:
    if minimum_service_months == 0:
        return True
    if date_of_joining is None:
        return False
    return calculate_service_months(date_of_joining, reference_date) >= minimum_service_months


def get_service_based_entitlement(
    date_of_joining: Optional[DateLike],
    tiers: Optional[Mapping[int, int]] = None,
    reference_date: Optional[DateLike] = None,
) -> int:
    """Days for the highest service threshold (in months) already reached."""

    if date_of_joining is None:
        return 0
    tiers = DEFAULT_ANNUAL_LEAVE_TIERS if tiers is None else tiers
    service_months = calculate_service_months(date_of_joining, reference_date)

    for threshold in sorted((int(k) for k in tiers), reverse=True):
        if service_months >= threshold:
            return int(tiers[threshold])
    return 0


def calculate_sick_leave_pay_breakdown(
    days_used: DecimalLike,
    tiers: Optional[Sequence[PayTier]] = None,
) -> SickLeavePayBreakdown:
    used = to_decimal(days_used)
    remaining = used
    full = half = unpaid = ZERO

    for tier in tiers or DEFAULT_SICK_LEAVE_TIERS:
        if remaining <= 0:
            break
        in_tier = min(remaining, Decimal(tier.days))
        remaining -= in_tier
        if tier.pay_percent == 100:
            full += in_tier
        elif tier.pay_percent == 50:
            half += in_tier
        else:
            unpaid += in_tier

    return SickLeavePayBreakdown(full_pay_days=full, half_pay_days=half, unpaid_days=unpaid, total_days=used)


def get_months_worked_in_year(
    date_of_joining: Optional[DateLike],
    year: int,
    reference_date: Optional[DateLike] = None,
) -> int:
    """Months (0-12) of ``year`` the employee has started working in."""

    if date_of_joining is None:
        return 0
    join = coerce_date(date_of_joining)
    ref = coerce_date(reference_date) if reference_date is not None else today_local()

    if join > ref or join.year > year or ref.year < year:
        return 0

    effective_start = max(join, date(year, 1, 1))
    effective_end = min(ref, date(year, 12, 31))
    if effective_start > effective_end:
        return 0

    return min(12, max(0, effective_end.month - effective_start.month + 1))


def calculate_accrued_annual_leave(
    date_of_joining: Optional[DateLike],
    annual_entitlement: DecimalLike,
    year: Optional[int] = None,
    reference_date: Optional[DateLike] = None,
) -> Decimal:
    entitlement = to_decimal(annual_entitlement)
    if date_of_joining is None or entitlement <= 0:
        return round_money(ZERO)

    ref = coerce_date(reference_date) if reference_date is not None else today_local()
    months = get_months_worked_in_year(date_of_joining, year if year is not None else ref.year, ref)
    return round_money(entitlement / 12 * months)


def get_annual_leave_details(
    date_of_joining: Optional[DateLike],
    year: Optional[int] = None,
    reference_date: Optional[DateLike] = None,
) -> AnnualLeaveDetails:
    if date_of_joining is None:
        return AnnualLeaveDetails(
            annual_entitlement=0,
            accrued=round_money(ZERO),
            months_worked=0,
            years_of_service=0,
            is_eligible=False,
            note="Date of joining not available",
        )

    ref = coerce_date(reference_date) if reference_date is not None else today_local()
    year = year if year is not None else ref.year
    service_months = calculate_service_months(date_of_joining, ref)

    entitlement = DEFAULT_ANNUAL_ENTITLEMENT
    if service_months >= SENIOR_SERVICE_MONTHS:
        entitlement = SENIOR_ANNUAL_ENTITLEMENT

    return AnnualLeaveDetails(
        annual_entitlement=entitlement,
        accrued=calculate_accrued_annual_leave(date_of_joining, entitlement, year, ref),
        months_worked=get_months_worked_in_year(date_of_joining, year, ref),
        years_of_service=service_months // 12,
        is_eligible=True,
    )
