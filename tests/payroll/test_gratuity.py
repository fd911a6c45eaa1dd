from __future__ import annotations

from datetime import date
from decimal import Decimal

from src.payroll_core.payroll_core.payroll.gratuity import calculate_gratuity, project_gratuity


def test_full_years_of_service():
    calc = calculate_gratuity(Decimal("10000"), date(2020, 1, 1), date(2025, 1, 1))

    assert calc.is_eligible
    assert calc.years_of_service == 5
    assert calc.months_of_service == 60
    assert calc.gratuity_amount == Decimal("35000.00")
    assert calc.daily_rate == Decimal("333.33")
    assert calc.weekly_rate == Decimal("2333.33")
    assert calc.breakdown.partial_year_amount == Decimal("0.00")


def test_partial_year_is_pro_rated():
    calc = calculate_gratuity("10000", "2020-01-01", "2021-07-01")

    assert calc.years_of_service == 1
    assert calc.days_of_service == 547
    assert calc.breakdown.full_years_amount == Decimal("7000.00")
    assert calc.breakdown.partial_year_amount == Decimal("3500.00")
    assert calc.gratuity_amount == Decimal("10500.00")


def test_under_one_year_is_not_eligible():
    calc = calculate_gratuity(10000, date(2024, 6, 1), date(2025, 1, 1))

    assert not calc.is_eligible
    assert calc.gratuity_amount == Decimal("0.00")
    assert calc.ineligible_reason == "Minimum 12 months of service required. Current: 7 months."


def test_zero_salary_gives_zero_gratuity():
    assert calculate_gratuity(0, date(2015, 1, 1), date(2025, 1, 1)).gratuity_amount == Decimal("0.00")


def test_projection_from_today():
    projections = project_gratuity(10000, date(2024, 1, 1), (1, 3), today=date(2025, 1, 1))

    assert [(p.years, p.date, p.amount) for p in projections] == [
        (1, date(2026, 1, 1), Decimal("14000.00")),
        (3, date(2028, 1, 1), Decimal("28000.00")),
    ]
