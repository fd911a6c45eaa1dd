from datetime import date
from decimal import Decimal

from src.payroll_core.payroll_core.core.enums import LeaveStatus
from src.payroll_core.payroll_core.leave.model import LeaveRequest, LeaveType
from src.payroll_core.payroll_core.payroll.calculator.standard_calculator import StandardDayCounter


def _leave(start, end, total_days):
    return LeaveRequest(
        id="1",
        request_number="LR-00001",
        member_id="m1",
        tenant_id="t1",
        status=LeaveStatus.APPROVED,
        start_date=start,
        end_date=end,
        total_days=Decimal(total_days),
        leave_type=LeaveType(name="Unpaid Leave", is_paid=False),
    )


def test_contained_leave_trusts_stored_total():
    # 8 calendar days, 6 working days recorded at submission
    leave = _leave(date(2025, 1, 2), date(2025, 1, 9), "6")

    assert StandardDayCounter().days_in_period(leave, date(2025, 1, 1), date(2025, 1, 31)) == Decimal(6)


def test_crossing_leave_counts_calendar_days_in_period():
    leave = _leave(date(2025, 1, 30), date(2025, 2, 2), "2")

    assert StandardDayCounter().days_in_period(leave, date(2025, 2, 1), date(2025, 2, 28)) == Decimal(2)
    assert StandardDayCounter().days_in_period(leave, date(2025, 1, 1), date(2025, 1, 31)) == Decimal(2)


def test_leave_outside_period_is_zero():
    leave = _leave(date(2025, 3, 1), date(2025, 3, 2), "2")

    assert StandardDayCounter().days_in_period(leave, date(2025, 1, 1), date(2025, 1, 31)) == 0
