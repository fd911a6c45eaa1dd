from __future__ import annotations

from datetime import date, datetime

import pytest

from src.payroll_core.payroll_core.common.datetime_utils import (
    add_months,
    coerce_date,
    days_in_month,
    days_inclusive,
    month_bounds,
    months_elapsed,
    next_month_start,
    parse_iso_date,
)
from src.payroll_core.payroll_core.core.exceptions import ValidationError


def test_add_months_clamps_to_month_end():
    assert add_months(date(2024, 1, 31), 1) == date(2024, 2, 29)
    assert add_months(date(2025, 1, 31), 1) == date(2025, 2, 28)
    assert add_months(date(2024, 11, 30), 3) == date(2025, 2, 28)


def test_add_months_rolls_years_both_ways():
    assert add_months(date(2024, 12, 15), 1) == date(2025, 1, 15)
    assert add_months(date(2025, 1, 15), -1) == date(2024, 12, 15)
    assert add_months(date(2025, 3, 31), -1) == date(2025, 2, 28)
    assert add_months("2020-06-10", 120) == date(2030, 6, 10)


def test_month_bounds():
    assert month_bounds(2024, 2) == (date(2024, 2, 1), date(2024, 2, 29))
    assert days_in_month(2025, 2) == 28
    assert next_month_start(date(2024, 12, 31)) == date(2025, 1, 1)


@pytest.mark.parametrize("month", [0, 13])
def test_month_out_of_range_raises(month):
    with pytest.raises(ValidationError):
        month_bounds(2025, month)


def test_parse_and_coerce_dates():
    assert parse_iso_date("2025-01-31") == date(2025, 1, 31)
    assert coerce_date(datetime(2025, 1, 31, 18, 30)) == date(2025, 1, 31)
    with pytest.raises(ValidationError):
        parse_iso_date("2025-13-01")
    with pytest.raises(TypeError):
        coerce_date(20250131)


def test_day_and_month_counting():
    assert days_inclusive(date(2024, 12, 28), date(2025, 1, 3)) == 7
    assert days_inclusive(date(2025, 1, 3), date(2025, 1, 1)) == 0
    assert months_elapsed("2024-11-30", "2025-02-01") == 3
