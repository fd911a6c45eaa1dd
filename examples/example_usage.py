"""Example: call the calculators and the deduction service directly.

Needs a reachable MySQL database for the deduction part (see config/).
"""

import logging
from datetime import date
from decimal import Decimal

from src.payroll_core.payroll_core.depreciation.calculator import (
    calculate_depreciation_summary,
    generate_depreciation_schedule,
)
from src.payroll_core.payroll_core.depreciation.model import DepreciationInput
from src.payroll_core.payroll_core.core.exceptions import RepositoryError
from src.payroll_core.payroll_core.leave.calculator import calculate_working_days
from src.payroll_core.payroll_core.loans.calculator import calculate_loan_end_date
from src.payroll_core.payroll_core.main import bootstrap
from src.payroll_core.payroll_core.payroll.salary import calculate_gross_salary, daily_salary_rate

logger = logging.getLogger(__name__)


def main():
    container = bootstrap()

    laptop = DepreciationInput(
        acquisition_cost=Decimal("6000"),
        salvage_value=Decimal("0"),
        useful_life_months=60,
        depreciation_start_date=date(2025, 1, 15),
    )
    schedule = generate_depreciation_schedule(laptop)
    print(f"{len(schedule)} periods, first {schedule[0].monthly_amount}")
    print(calculate_depreciation_summary(laptop))

    print("working days:", calculate_working_days("2025-01-05", "2025-01-09"))
    print("loan ends:", calculate_loan_end_date("2024-01-31", 2))

    gross = calculate_gross_salary(Decimal("8000"), housing_allowance=Decimal("2500"))
    try:
        deductions = container.deduction_service.calculate_unpaid_leave_deductions(
            member_id="1", year=2025, month=1, daily_salary=daily_salary_rate(gross), tenant_id="1"
        )
    except RepositoryError:
        logger.exception("Deduction lookup failed")
        return
    for line in deductions:
        print(line.description, line.deduction_amount)


if __name__ == "__main__":
    main()
