from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class LoanInstallment:
    number: int
    due_date: date
    amount: Decimal
    # Principal still owed once this installment is deducted.
    remaining_balance: Decimal
