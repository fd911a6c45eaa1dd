from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class UnpaidLeaveDeduction:
    leave_request_id: str
    request_number: str
    leave_type_name: str
    start_date: date
    end_date: date
    # Days of this leave attributable to the pay period.
    total_days: Decimal
    daily_rate: Decimal
    deduction_amount: Decimal

    @property
    def description(self) -> str:
        return f"{self.leave_type_name} ({self.total_days.normalize():f} days)"


@dataclass(frozen=True)
class NetSalary:
    gross_salary: Decimal
    total_deductions: Decimal
    # Deductions actually applied; never more than gross.
    applied_deductions: Decimal
    net_salary: Decimal


@dataclass(frozen=True)
class GratuityBreakdown:
    full_years_amount: Decimal
    partial_year_amount: Decimal


@dataclass(frozen=True)
class GratuityCalculation:
    basic_salary: Decimal
    years_of_service: int
    months_of_service: int
    days_of_service: int
    weeks_per_year: int
    gratuity_amount: Decimal
    daily_rate: Decimal
    weekly_rate: Decimal
    breakdown: GratuityBreakdown
    ineligible_reason: Optional[str] = None

    @property
    def is_eligible(self) -> bool:
        return self.ineligible_reason is None


@dataclass(frozen=True)
class GratuityProjection:
    years: int
    date: date
    amount: Decimal
