from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from src.payroll_core.payroll_core.core.enums import LeaveStatus
from src.payroll_core.payroll_core.core.exceptions import ValidationError
from src.payroll_core.payroll_core.leave.model import LeaveRequest, LeaveType
from src.payroll_core.payroll_core.payroll.service import UnpaidLeaveDeductionService

UNPAID = LeaveType(name="Unpaid Leave", is_paid=False)
ANNUAL = LeaveType(name="Annual Leave", is_paid=True)


def _leave(rid, start, end, total_days, *, status=LeaveStatus.APPROVED, leave_type=UNPAID):
    return LeaveRequest(
        id=rid,
        request_number=f"LR-{int(rid):05d}",
        member_id="m1",
        tenant_id="t1",
        status=status,
        start_date=start,
        end_date=end,
        total_days=Decimal(total_days),
        leave_type=leave_type,
    )


class InMemoryLeaveRequests:
    """Returns every stored leave overlapping the period, like the SQL filter would."""

    def __init__(self, leaves):
        self.leaves = list(leaves)
        self.calls = []

    def list_approved_unpaid_overlapping(self, *, member_id, tenant_id, period_start, period_end):
        self.calls.append((member_id, tenant_id, period_start, period_end))
        return [
            leave
            for leave in self.leaves
            if leave.member_id == member_id
            and leave.tenant_id == tenant_id
            and leave.start_date <= period_end
            and leave.end_date >= period_start
        ]


CROSSING = _leave("1", date(2024, 12, 28), date(2025, 1, 3), "7")
HALF_DAY = _leave("2", date(2025, 1, 6), date(2025, 1, 6), "0.5")


def test_leave_crossing_into_period_counts_calendar_days_inside():
    repo = InMemoryLeaveRequests([CROSSING])
    svc = UnpaidLeaveDeductionService(repo)

    [deduction] = svc.calculate_unpaid_leave_deductions("m1", 2025, 1, Decimal("100"), "t1")

    assert deduction.total_days == Decimal(3)
    assert deduction.deduction_amount == Decimal("300.00")
    assert deduction.start_date == date(2024, 12, 28)
    assert deduction.end_date == date(2025, 1, 3)
    assert deduction.description == "Unpaid Leave (3 days)"
    assert repo.calls == [("m1", "t1", date(2025, 1, 1), date(2025, 1, 31))]


def test_leave_crossing_out_of_period():
    svc = UnpaidLeaveDeductionService(InMemoryLeaveRequests([CROSSING]))

    [deduction] = svc.calculate_unpaid_leave_deductions("m1", 2024, 12, "100", "t1")

    assert deduction.total_days == Decimal(4)
    assert deduction.deduction_amount == Decimal("400.00")


def test_contained_half_day_uses_stored_total():
    svc = UnpaidLeaveDeductionService(InMemoryLeaveRequests([HALF_DAY]))

    [deduction] = svc.calculate_unpaid_leave_deductions("m1", 2025, 1, 200, "t1")

    assert deduction.total_days == Decimal("0.5")
    assert deduction.deduction_amount == Decimal("100.00")
    assert deduction.daily_rate == Decimal("200")


def test_deductions_are_rounded_to_cents():
    svc = UnpaidLeaveDeductionService(InMemoryLeaveRequests([CROSSING]))

    [deduction] = svc.calculate_unpaid_leave_deductions("m1", 2025, 1, Decimal("366.6667"), "t1")

    assert deduction.deduction_amount == Decimal("1100.00")


def test_paid_or_unapproved_leave_is_ignored():
    svc = UnpaidLeaveDeductionService(
        InMemoryLeaveRequests(
            [
                _leave("3", date(2025, 1, 12), date(2025, 1, 13), "2", leave_type=ANNUAL),
                _leave("4", date(2025, 1, 14), date(2025, 1, 15), "2", status=LeaveStatus.PENDING),
            ]
        )
    )

    assert svc.calculate_unpaid_leave_deductions("m1", 2025, 1, 100, "t1") == []
    assert svc.get_unpaid_leave_days_in_period("m1", 2025, 1, "t1") == 0


def test_unpaid_days_in_period_totals_all_leaves():
    svc = UnpaidLeaveDeductionService(InMemoryLeaveRequests([CROSSING, HALF_DAY]))

    assert svc.get_unpaid_leave_days_in_period("m1", 2025, 1, "t1") == Decimal("3.5")
    assert svc.has_unpaid_leave_in_period("m1", 2025, 1, "t1")
    assert not svc.has_unpaid_leave_in_period("m1", 2025, 2, "t1")
    assert not svc.has_unpaid_leave_in_period("other", 2025, 1, "t1")


def test_zero_daily_salary_gives_zero_deduction():
    svc = UnpaidLeaveDeductionService(InMemoryLeaveRequests([HALF_DAY]))

    [deduction] = svc.calculate_unpaid_leave_deductions("m1", 2025, 1, 0, "t1")

    assert deduction.deduction_amount == Decimal("0.00")


def test_invalid_month_raises():
    svc = UnpaidLeaveDeductionService(InMemoryLeaveRequests([]))

    with pytest.raises(ValidationError):
        svc.calculate_unpaid_leave_deductions("m1", 2025, 13, 100, "t1")


def test_custom_day_counter_is_used():
    class FlatOneDay:
        def days_in_period(self, leave, period_start, period_end):
            return Decimal(1)

    svc = UnpaidLeaveDeductionService(InMemoryLeaveRequests([CROSSING]), day_counter=FlatOneDay())

    [deduction] = svc.calculate_unpaid_leave_deductions("m1", 2025, 1, 50, "t1")
    assert deduction.deduction_amount == Decimal("50.00")


def test_contained_leave_with_zero_days_still_gets_a_line():
    svc = UnpaidLeaveDeductionService(
        InMemoryLeaveRequests([_leave("5", date(2025, 1, 10), date(2025, 1, 10), "0")])
    )

    [deduction] = svc.calculate_unpaid_leave_deductions("m1", 2025, 1, 100, "t1")

    assert deduction.total_days == 0
    assert deduction.deduction_amount == Decimal("0.00")
    assert deduction.description == "Unpaid Leave (0 days)"


def test_leave_outside_period_is_skipped_even_if_returned():
    class UnfilteredLeaveRequests:
        def list_approved_unpaid_overlapping(self, *, member_id, tenant_id, period_start, period_end):
            return [_leave("6", date(2025, 3, 1), date(2025, 3, 2), "2"), HALF_DAY]

    svc = UnpaidLeaveDeductionService(UnfilteredLeaveRequests())

    lines = svc.calculate_unpaid_leave_deductions("m1", 2025, 1, 100, "t1")

    assert [line.request_number for line in lines] == ["LR-00002"]
