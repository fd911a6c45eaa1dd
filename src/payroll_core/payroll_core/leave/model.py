from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from ..core.enums import LeaveRequestType, LeaveStatus


@dataclass(frozen=True)
class LeaveType:
    name: str
    is_paid: bool


@dataclass(frozen=True)
class LeaveRequest:
    id: str
    request_number: str
    member_id: str
    tenant_id: str
    status: LeaveStatus
    start_date: date
    end_date: date
    # Pre-computed at submission (supports 0.5 steps); never re-derived here.
    total_days: Decimal
    leave_type: LeaveType
    request_type: LeaveRequestType = LeaveRequestType.FULL_DAY


@dataclass(frozen=True)
class PublicHoliday:
    name: str
    start_date: date
    end_date: date

    def covers(self, day: date) -> bool:
        return self.start_date <= day <= self.end_date


@dataclass(frozen=True)
class PayTier:
    days: int
    pay_percent: int
    label: str


@dataclass(frozen=True)
class SickLeavePayBreakdown:
    full_pay_days: Decimal
    half_pay_days: Decimal
    unpaid_days: Decimal
    total_days: Decimal


@dataclass(frozen=True)
class AnnualLeaveDetails:
    annual_entitlement: int
    accrued: Decimal
    months_worked: int
    years_of_service: int
    is_eligible: bool
    note: Optional[str] = None
