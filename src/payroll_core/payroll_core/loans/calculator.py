"""Salary-advance / loan repayment arithmetic.

Installments are deducted monthly from payroll, starting in the month of
``start`` and falling on the same day of month (clamped to month end).
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from ..common.datetime_utils import DateLike, add_months, coerce_date
from ..common.money import ZERO, DecimalLike, money_divide, money_subtract, round_money, to_decimal
from ..common.validators import require_non_negative, require_positive_int
from .model import LoanInstallment


def calculate_loan_end_date(start: DateLike, installments: int) -> date:
    """Due date of the last installment; 2024-01-31 with 2 installments -> 2024-02-29."""

    count = require_positive_int(installments, "installments")
    return add_months(coerce_date(start), count - 1)


def calculate_installment_amount(principal: DecimalLike, installments: int) -> Decimal:
    count = require_positive_int(installments, "installments")
    return money_divide(require_non_negative(principal, "principal"), count)


def generate_installment_schedule(principal: DecimalLike, installments: int, start: DateLike) -> list[LoanInstallment]:
    amount = require_non_negative(principal, "principal")
    count = require_positive_int(installments, "installments")
    start_d = coerce_date(start)
    regular = calculate_installment_amount(amount, count)

    schedule: list[LoanInstallment] = []
    remaining = round_money(amount)
    for number in range(1, count + 1):
        # Last installment takes whatever rounding left over.
        value = remaining if number == count else min(regular, remaining)
        remaining = money_subtract(remaining, value)
        schedule.append(
            LoanInstallment(
                number=number,
                due_date=add_months(start_d, number - 1),
                amount=value,
                remaining_balance=remaining,
            )
        )
    return schedule


def calculate_remaining_loan_balance(principal: DecimalLike, total_paid: DecimalLike) -> Decimal:
    return max(money_subtract(principal, total_paid), round_money(ZERO))


def calculate_loan_deduction(monthly_deduction: DecimalLike, remaining_amount: DecimalLike) -> Decimal:
    """What payroll takes this month: the agreed installment, or less to settle the loan."""

    remaining = to_decimal(remaining_amount)
    if remaining <= 0:
        return round_money(ZERO)
    return round_money(min(to_decimal(monthly_deduction), remaining))
