from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date
from decimal import Decimal

from ...leave.model import LeaveRequest


class PayPeriodDayCounter(ABC):
    """Calculator interface (Strategy Pattern for unpaid-leave day counting)."""

    @abstractmethod
    def days_in_period(self, leave: LeaveRequest, period_start: date, period_end: date) -> Decimal:
        raise NotImplementedError
