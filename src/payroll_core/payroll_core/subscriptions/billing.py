"""Subscription cost normalization and renewal dates."""

from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal
from typing import Optional, Union

from ..common.datetime_utils import DateLike, add_months, coerce_date, today_local
from ..common.money import ZERO, DecimalLike, round_money, to_decimal
from ..core.enums import BillingCycle

# Monthly cost = amount * factor.
_MONTHLY_FACTORS: dict[BillingCycle, Decimal] = {
    BillingCycle.WEEKLY: Decimal(52) / Decimal(12),
    BillingCycle.MONTHLY: Decimal(1),
    BillingCycle.QUARTERLY: Decimal(1) / Decimal(3),
    BillingCycle.SEMI_ANNUALLY: Decimal(1) / Decimal(6),
    BillingCycle.YEARLY: Decimal(1) / Decimal(12),
    BillingCycle.ONE_TIME: ZERO,
}

_CYCLE_MONTHS: dict[BillingCycle, int] = {
    BillingCycle.MONTHLY: 1,
    BillingCycle.QUARTERLY: 3,
    BillingCycle.SEMI_ANNUALLY: 6,
    BillingCycle.YEARLY: 12,
}

CycleLike = Union[BillingCycle, str]


def normalize_to_monthly(amount: DecimalLike, cycle: CycleLike) -> Decimal:
    """Recurring cost per month. Unknown cycles are treated as monthly."""

    factor = _MONTHLY_FACTORS.get(BillingCycle.parse(cycle), Decimal(1))
    return round_money(to_decimal(amount) * factor)


def annualize(amount: DecimalLike, cycle: CycleLike) -> Decimal:
    parsed = BillingCycle.parse(cycle)
    if parsed == BillingCycle.ONE_TIME:
        return round_money(ZERO)
    factor = _MONTHLY_FACTORS.get(parsed, Decimal(1))
    return round_money(to_decimal(amount) * factor * 12)


def get_next_renewal_date(
    renewal_date: Optional[DateLike],
    cycle: CycleLike,
    today: Optional[date] = None,
) -> Optional[date]:
    """First renewal strictly after ``today``, stepping whole cycles from ``renewal_date``."""

    if renewal_date is None:
        return None
    base = coerce_date(renewal_date)
    today = today or today_local()
    if base > today:
        return base

    parsed = BillingCycle.parse(cycle)
    if parsed == BillingCycle.WEEKLY:
        weeks = (today - base).days // 7 + 1
        return base + timedelta(days=7 * weeks)

    step = _CYCLE_MONTHS.get(parsed)
    if step is None:
        return base

    # Step from the base date each time so month-end dates clamp consistently.
    cycles = 1
    nxt = add_months(base, step)
    while nxt <= today:
        cycles += 1
        nxt = add_months(base, step * cycles)
    return nxt
