from __future__ import annotations

from decimal import Decimal
from fractions import Fraction

import pytest

from src.payroll_core.payroll_core.common.money import (
    money_add,
    money_divide,
    money_multiply,
    money_subtract,
    round_money,
    to_decimal,
)
from src.payroll_core.payroll_core.core.exceptions import ValidationError


class StoredDecimal:
    """Stands in for a high-precision decimal column wrapper."""

    def __init__(self, text: str):
        self._text = text

    def to_decimal(self) -> Decimal:
        return Decimal(self._text)


def test_to_decimal_accepts_supported_shapes():
    assert to_decimal(5) == Decimal("5")
    assert to_decimal(0.1) == Decimal("0.1")
    assert to_decimal(" 12.50 ") == Decimal("12.50")
    assert to_decimal(StoredDecimal("99.999")) == Decimal("99.999")
    assert to_decimal(Fraction(1, 4)) == Decimal("0.25")


def test_to_decimal_defaults_unrecognized_shapes_to_zero():
    assert to_decimal(None) == 0
    assert to_decimal("") == 0
    assert to_decimal(object()) == 0


@pytest.mark.parametrize("value", ["abc", float("nan"), float("inf"), Decimal("NaN"), "Infinity"])
def test_to_decimal_rejects_non_numbers(value):
    with pytest.raises(ValidationError):
        to_decimal(value)


def test_validation_error_is_a_value_error():
    with pytest.raises(ValueError):
        to_decimal("12,5")


def test_round_money_half_away_from_zero():
    assert round_money(Decimal("0.125")) == Decimal("0.13")
    assert round_money(Decimal("-0.125")) == Decimal("-0.13")
    assert round_money(Decimal("2.344")) == Decimal("2.34")


def test_money_helpers_round_once_on_result():
    assert money_add(0.1, 0.2) == Decimal("0.30")
    assert money_add("0.004", "0.004") == Decimal("0.01")
    assert money_subtract("10", "0.015") == Decimal("9.99")
    assert money_multiply("19.99", 3) == Decimal("59.97")
    assert money_divide(100, 3) == Decimal("33.33")


def test_money_divide_by_zero_is_zero():
    assert money_divide(10, 0) == Decimal("0.00")
    assert money_divide(10, None) == Decimal("0.00")
