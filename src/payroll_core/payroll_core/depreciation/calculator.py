"""Straight-line asset depreciation.

Formula: (cost - salvage value) / useful life in months, recognised monthly.
A month in which the asset enters service mid-way is pro-rated by the days
remaining in it. The month that completes the useful life takes whatever is
left, absorbing rounding. No period books more than remains, so accumulated
depreciation never passes the depreciable amount.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import date
from decimal import ROUND_CEILING, ROUND_HALF_UP, Decimal
from typing import Iterator, Optional

from ..common.datetime_utils import (
    DateLike,
    coerce_date,
    month_bounds,
    months_elapsed,
    next_month_start,
    today_local,
)
from ..common.money import ZERO, round_money, to_decimal
from ..core.constants import DEPRECIATION_EPSILON, DEPRECIATION_MAX_PERIODS
from .model import DepreciationInput, DepreciationPeriodResult, DepreciationSummary

ONE = Decimal("1")


def _useful_life(input: DepreciationInput) -> int:
    return int(input.useful_life_months or 0)


def calculate_monthly_depreciation(
    input: DepreciationInput,
    calculation_date: Optional[DateLike] = None,
) -> Optional[DepreciationPeriodResult]:
    """Depreciation for the month containing ``calculation_date``.

    Returns None when there is nothing to book: invalid cost/life/salvage,
    a month before the asset's start month, or an asset already fully
    depreciated.
    """

    calc_date = coerce_date(calculation_date) if calculation_date is not None else today_local()

    cost = to_decimal(input.acquisition_cost)
    salvage = to_decimal(input.salvage_value)
    accumulated = to_decimal(input.accumulated_depreciation)
    life = _useful_life(input)

    if cost <= 0 or life <= 0 or salvage < 0:
        return None

    depreciable = cost - salvage
    if depreciable <= 0:
        return None

    period_start, period_end = month_bounds(calc_date.year, calc_date.month)
    start = coerce_date(input.depreciation_start_date)
    if start > period_end:
        return None

    remaining = depreciable - accumulated
    if remaining < DEPRECIATION_EPSILON:
        return None

    base_amount = round_money(depreciable / life)

    pro_rata_factor = ONE
    if period_start < start <= period_end:
        days_in_month = period_end.day
        pro_rata_factor = Decimal(days_in_month - start.day + 1) / Decimal(days_in_month)

    amount = round_money(base_amount * pro_rata_factor)

    # The month that completes the useful life books whatever is left; a
    # pro-rated first month pushes that month one period later.
    last_period = life if start.day > 1 else life - 1

    fully_depreciated = False
    if amount >= remaining or months_elapsed(start, period_start) >= last_period:
        amount = remaining
        fully_depreciated = True

    new_accumulated = accumulated + amount
    if depreciable - new_accumulated < DEPRECIATION_EPSILON:
        fully_depreciated = True

    return DepreciationPeriodResult(
        period_start=period_start,
        period_end=period_end,
        monthly_amount=round_money(amount),
        new_accumulated_amount=round_money(new_accumulated),
        new_net_book_value=round_money(cost - new_accumulated),
        pro_rata_factor=pro_rata_factor,
        is_fully_depreciated=fully_depreciated,
    )


def iter_depreciation_schedule(
    input: DepreciationInput,
    *,
    max_periods: int = DEPRECIATION_MAX_PERIODS,
) -> Iterator[DepreciationPeriodResult]:
    """Lazily walk the projected schedule month by month (single pass)."""

    current = coerce_date(input.depreciation_start_date).replace(day=1)
    accumulated = to_decimal(input.accumulated_depreciation)

    for _ in range(max_periods):
        result = calculate_monthly_depreciation(
            replace(input, accumulated_depreciation=accumulated),
            current,
        )
        if result is None:
            return

        yield result
        accumulated = result.new_accumulated_amount

        if result.is_fully_depreciated:
            return
        current = next_month_start(current)


def generate_depreciation_schedule(
    input: DepreciationInput,
    *,
    max_periods: int = DEPRECIATION_MAX_PERIODS,
) -> list[DepreciationPeriodResult]:
    """Full projected schedule; empty when the asset has nothing left to depreciate."""
    return list(iter_depreciation_schedule(input, max_periods=max_periods))


def calculate_depreciation_summary(input: DepreciationInput) -> DepreciationSummary:
    cost = to_decimal(input.acquisition_cost)
    salvage = to_decimal(input.salvage_value)
    accumulated = to_decimal(input.accumulated_depreciation)
    life = _useful_life(input)

    depreciable = max(ZERO, cost - salvage)
    monthly = depreciable / life if life > 0 else ZERO
    remaining = max(ZERO, depreciable - accumulated)

    remaining_months = 0
    if monthly > 0:
        # remaining / (depreciable / life) as a single division.
        remaining_months = int((remaining * life / depreciable).to_integral_value(rounding=ROUND_CEILING))

    percent = 0
    if depreciable > 0:
        raw_percent = (accumulated / depreciable * 100).to_integral_value(rounding=ROUND_HALF_UP)
        percent = min(100, max(0, int(raw_percent)))

    return DepreciationSummary(
        acquisition_cost=round_money(cost),
        salvage_value=round_money(salvage),
        depreciable_amount=round_money(depreciable),
        useful_life_months=life,
        monthly_depreciation=round_money(monthly),
        annual_depreciation=round_money(monthly * 12),
        accumulated_depreciation=round_money(accumulated),
        net_book_value=round_money(cost - accumulated),
        remaining_months=remaining_months,
        percent_depreciated=percent,
        is_fully_depreciated=remaining < DEPRECIATION_EPSILON,
    )


def calculate_months_elapsed(start_date: DateLike, end_date: Optional[DateLike] = None) -> int:
    return months_elapsed(start_date, end_date if end_date is not None else today_local())


def is_period_already_processed(period_end: DateLike, last_depreciation_date: Optional[DateLike]) -> bool:
    """True when the month of ``period_end`` was already booked."""

    if last_depreciation_date is None:
        return False

    period = coerce_date(period_end)
    last = coerce_date(last_depreciation_date)
    return date(period.year, period.month, 1) <= date(last.year, last.month, 1)
