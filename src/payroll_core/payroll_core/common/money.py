from __future__ import annotations

import numbers
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Protocol, Union, runtime_checkable

from ..core.constants import MONEY_PLACES
from ..core.exceptions import ValidationError

ZERO = Decimal("0")


@runtime_checkable
class SupportsToDecimal(Protocol):
    """Wrapper types from the storage layer (high-precision decimal columns)."""

    def to_decimal(self) -> Decimal: ...


DecimalLike = Union[Decimal, int, float, str, SupportsToDecimal, numbers.Real, None]


def to_decimal(value: DecimalLike) -> Decimal:
    """Normalize a money/day figure before any arithmetic.

    Accepted shapes, checked in order:
    - ``Decimal`` / ``int`` / ``float``
    - numeric strings (``""`` counts as zero)
    - objects exposing ``to_decimal()``
    - any other ``numbers.Real`` (``Fraction``, numpy scalars, ...)

    Anything else (including ``None``) normalizes to zero. Non-numeric
    strings and non-finite values raise ``ValidationError``.
    """

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        result = Decimal(repr(value))
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return ZERO
        try:
            result = Decimal(text)
        except InvalidOperation as exc:
            raise ValidationError(f"Not a number: {value!r}") from exc
    elif isinstance(value, SupportsToDecimal):
        return to_decimal(value.to_decimal())
    elif isinstance(value, numbers.Real):
        result = Decimal(repr(float(value)))
    else:
        return ZERO

    if not result.is_finite():
        raise ValidationError(f"Not a finite number: {value!r}")
    return result


def round_money(value: DecimalLike, places: Decimal = MONEY_PLACES) -> Decimal:
    """Round half away from zero (0.125 -> 0.13, -0.125 -> -0.13)."""
    return to_decimal(value).quantize(places, rounding=ROUND_HALF_UP)


# Arithmetic helpers round once, on the final result only.


def money_add(*values: DecimalLike) -> Decimal:
    return round_money(sum((to_decimal(v) for v in values), ZERO))


def money_subtract(a: DecimalLike, b: DecimalLike) -> Decimal:
    return round_money(to_decimal(a) - to_decimal(b))


def money_multiply(a: DecimalLike, b: DecimalLike) -> Decimal:
    return round_money(to_decimal(a) * to_decimal(b))


def money_divide(a: DecimalLike, b: DecimalLike) -> Decimal:
    divisor = to_decimal(b)
    if divisor == 0:
        return round_money(ZERO)
    return round_money(to_decimal(a) / divisor)
