"""Depreciation up to a disposal date and the resulting gain or loss (IAS 16)."""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from ..common.datetime_utils import DateLike, coerce_date, days_inclusive
from ..common.money import DecimalLike, round_money, to_decimal
from ..core.constants import AVERAGE_DAYS_PER_MONTH, FULLY_DEPRECIATED_TOLERANCE
from .model import DepreciationInput, ProRataDepreciationResult


def calculate_pro_rata_depreciation(
    input: DepreciationInput,
    from_date: DateLike,
    to_date: DateLike,
) -> Optional[ProRataDepreciationResult]:
    """Depreciation from ``from_date`` to ``to_date`` inclusive.

    ``from_date`` is normally the day after the last booked period. The daily
    rate spreads the monthly amount over an average month of 30.44 days.
    """

    cost = to_decimal(input.acquisition_cost)
    salvage = to_decimal(input.salvage_value)
    accumulated = to_decimal(input.accumulated_depreciation)
    life = int(input.useful_life_months or 0)

    if cost <= 0 or life <= 0 or salvage < 0:
        return None

    depreciable = cost - salvage
    if depreciable <= 0:
        return None

    remaining = depreciable - accumulated
    if remaining <= FULLY_DEPRECIATED_TOLERANCE:
        return None

    start = coerce_date(from_date)
    end = coerce_date(to_date)
    days = days_inclusive(start, end)
    if days <= 0:
        return None

    daily_rate = depreciable / life / AVERAGE_DAYS_PER_MONTH
    amount = min(daily_rate * days, remaining)
    new_accumulated = accumulated + amount

    return ProRataDepreciationResult(
        days=days,
        amount=round_money(amount),
        new_accumulated_amount=round_money(new_accumulated),
        new_net_book_value=round_money(cost - new_accumulated),
        daily_rate=round_money(daily_rate),
        period_start=start,
        period_end=end,
    )


def calculate_disposal_gain_loss(disposal_proceeds: DecimalLike, net_book_value: DecimalLike) -> Decimal:
    """Positive for a gain, negative for a loss."""
    return round_money(to_decimal(disposal_proceeds) - to_decimal(net_book_value))
