from __future__ import annotations

from decimal import Decimal

from ..common.money import DecimalLike, money_add, money_divide, money_subtract, to_decimal
from ..core.constants import PAYROLL_DAYS_PER_MONTH
from .model import NetSalary


def daily_salary_rate(gross_monthly_salary: DecimalLike, days_per_month: int = PAYROLL_DAYS_PER_MONTH) -> Decimal:
    """Qatar 30-day convention: gross / 30, whatever the calendar month length."""
    return money_divide(gross_monthly_salary, days_per_month)


def calculate_gross_salary(
    basic_salary: DecimalLike,
    *,
    housing_allowance: DecimalLike = None,
    transport_allowance: DecimalLike = None,
    food_allowance: DecimalLike = None,
    phone_allowance: DecimalLike = None,
    other_allowances: DecimalLike = None,
) -> Decimal:
    return money_add(
        basic_salary,
        housing_allowance,
        transport_allowance,
        food_allowance,
        phone_allowance,
        other_allowances,
    )


def calculate_net_salary(gross_salary: DecimalLike, *deductions: DecimalLike) -> NetSalary:
    """Net pay with deductions capped at gross so net never goes negative."""

    gross = to_decimal(gross_salary)
    total = money_add(*deductions)
    applied = min(total, gross)
    return NetSalary(
        gross_salary=money_add(gross),
        total_deductions=total,
        applied_deductions=money_add(applied),
        net_salary=money_subtract(gross, applied),
    )
