from __future__ import annotations

from datetime import date
from decimal import Decimal

from ...common.datetime_utils import days_inclusive
from ...common.money import ZERO, to_decimal
from ...leave.model import LeaveRequest
from .base import PayPeriodDayCounter


class StandardDayCounter(PayPeriodDayCounter):
    """Standard rule: stored total_days when the leave sits inside the period,
    otherwise inclusive calendar days of the part inside the period.

    Half days of a leave that crosses a month boundary are not apportioned.
    """

    def days_in_period(self, leave: LeaveRequest, period_start: date, period_end: date) -> Decimal:
        effective_start = max(leave.start_date, period_start)
        effective_end = min(leave.end_date, period_end)
        if effective_start > effective_end:
            return ZERO

        if leave.start_date >= period_start and leave.end_date <= period_end:
            return to_decimal(leave.total_days)
        return Decimal(days_inclusive(effective_start, effective_end))
