"""End-of-service gratuity (Qatar Labor Law, art. 54).

Three weeks of basic salary per year of service, pro-rated for part years,
payable after at least one year of service.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Iterable, Optional

from ..common.datetime_utils import DateLike, add_months, coerce_date, today_local
from ..common.money import ZERO, DecimalLike, round_money, to_decimal
from ..core.constants import (
    DEFAULT_GRATUITY_PROJECTION_YEARS,
    GRATUITY_MINIMUM_MONTHS,
    GRATUITY_WEEKS_PER_YEAR,
    PAYROLL_DAYS_PER_MONTH,
)
from ..leave.entitlement import calculate_service_months
from .model import GratuityBreakdown, GratuityCalculation, GratuityProjection


def calculate_gratuity(
    basic_salary: DecimalLike,
    date_of_joining: DateLike,
    termination_date: Optional[DateLike] = None,
) -> GratuityCalculation:
    basic = to_decimal(basic_salary)
    months = calculate_service_months(date_of_joining, termination_date)
    years, partial_months = divmod(months, 12)
    days_of_service = months * 365 // 12

    daily_rate = basic / PAYROLL_DAYS_PER_MONTH
    weekly_rate = daily_rate * 7

    if months < GRATUITY_MINIMUM_MONTHS:
        return GratuityCalculation(
            basic_salary=basic,
            years_of_service=0,
            months_of_service=months,
            days_of_service=days_of_service,
            weeks_per_year=GRATUITY_WEEKS_PER_YEAR,
            gratuity_amount=round_money(ZERO),
            daily_rate=round_money(daily_rate),
            weekly_rate=round_money(weekly_rate),
            breakdown=GratuityBreakdown(full_years_amount=round_money(ZERO), partial_year_amount=round_money(ZERO)),
            ineligible_reason=(
                f"Minimum {GRATUITY_MINIMUM_MONTHS} months of service required. Current: {months} months."
            ),
        )

    full_years_amount = years * GRATUITY_WEEKS_PER_YEAR * weekly_rate
    partial_year_amount = Decimal(partial_months) / 12 * GRATUITY_WEEKS_PER_YEAR * weekly_rate

    return GratuityCalculation(
        basic_salary=basic,
        years_of_service=years,
        months_of_service=months,
        days_of_service=days_of_service,
        weeks_per_year=GRATUITY_WEEKS_PER_YEAR,
        gratuity_amount=round_money(full_years_amount + partial_year_amount),
        daily_rate=round_money(daily_rate),
        weekly_rate=round_money(weekly_rate),
        breakdown=GratuityBreakdown(
            full_years_amount=round_money(full_years_amount),
            partial_year_amount=round_money(partial_year_amount),
        ),
    )


def project_gratuity(
    basic_salary: DecimalLike,
    date_of_joining: DateLike,
    projection_years: Iterable[int] = DEFAULT_GRATUITY_PROJECTION_YEARS,
    *,
    today: Optional[date] = None,
) -> list[GratuityProjection]:
    """Gratuity the member would be owed N years from today."""

    today = coerce_date(today) if today is not None else today_local()
    out: list[GratuityProjection] = []
    for years in projection_years:
        when = add_months(today, 12 * int(years))
        calc = calculate_gratuity(basic_salary, date_of_joining, when)
        out.append(GratuityProjection(years=int(years), date=when, amount=calc.gratuity_amount))
    return out
