from __future__ import annotations

import logging
from decimal import Decimal
from typing import Optional

from ..common.datetime_utils import month_bounds
from ..common.money import ZERO, DecimalLike, round_money, to_decimal
from ..core.enums import LeaveStatus
from ..leave.model import LeaveRequest
from ..leave.repository import LeaveRequestRepository
from .calculator.base import PayPeriodDayCounter
from .calculator.standard_calculator import StandardDayCounter
from .model import UnpaidLeaveDeduction

logger = logging.getLogger(__name__)


class UnpaidLeaveDeductionService:
    """Turns approved unpaid leave into payslip deduction lines for one pay period."""

    def __init__(
        self,
        leave_requests: LeaveRequestRepository,
        *,
        day_counter: Optional[PayPeriodDayCounter] = None,
    ):
        self._leave_requests = leave_requests
        self._day_counter = day_counter or StandardDayCounter()

    def _unpaid_leaves(self, *, member_id: str, tenant_id: str, year: int, month: int):
        period_start, period_end = month_bounds(year, month)
        leaves = self._leave_requests.list_approved_unpaid_overlapping(
            member_id=member_id,
            tenant_id=tenant_id,
            period_start=period_start,
            period_end=period_end,
        )
        for leave in leaves:
            if not self._participates(leave):
                logger.debug(
                    "Ignoring leave %s (status=%s, paid=%s)",
                    leave.request_number, leave.status.value, leave.leave_type.is_paid,
                )
                continue
            # Outside the pay period.
            if leave.start_date > period_end or leave.end_date < period_start:
                continue
            yield leave, self._day_counter.days_in_period(leave, period_start, period_end)

    @staticmethod
    def _participates(leave: LeaveRequest) -> bool:
        return leave.status == LeaveStatus.APPROVED and not leave.leave_type.is_paid

    def calculate_unpaid_leave_deductions(
        self,
        member_id: str,
        year: int,
        month: int,
        daily_salary: DecimalLike,
        tenant_id: str,
    ) -> list[UnpaidLeaveDeduction]:
        daily_rate = to_decimal(daily_salary)
        out: list[UnpaidLeaveDeduction] = []

        for leave, days in self._unpaid_leaves(member_id=member_id, tenant_id=tenant_id, year=year, month=month):
            deduction = UnpaidLeaveDeduction(
                leave_request_id=leave.id,
                request_number=leave.request_number,
                leave_type_name=leave.leave_type.name,
                start_date=leave.start_date,
                end_date=leave.end_date,
                total_days=days,
                daily_rate=daily_rate,
                deduction_amount=round_money(days * daily_rate),
            )
            logger.debug("Unpaid leave %s: %s days -> %s", leave.request_number, days, deduction.deduction_amount)
            out.append(deduction)

        if out:
            logger.info(
                "Member %s %04d-%02d: %d unpaid leave deduction(s)",
                member_id, year, month, len(out),
            )
        return out

    def get_unpaid_leave_days_in_period(self, member_id: str, year: int, month: int, tenant_id: str) -> Decimal:
        total = ZERO
        for _, days in self._unpaid_leaves(member_id=member_id, tenant_id=tenant_id, year=year, month=month):
            total += days
        return total

    def has_unpaid_leave_in_period(self, member_id: str, year: int, month: int, tenant_id: str) -> bool:
        return self.get_unpaid_leave_days_in_period(member_id, year, month, tenant_id) > 0
