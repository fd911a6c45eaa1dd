from __future__ import annotations

from decimal import Decimal

from ..core.exceptions import ValidationError
from .money import DecimalLike, to_decimal


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_positive_int(value: int, field_name: str) -> int:
    if isinstance(value, bool) or int(value) != value or int(value) <= 0:
        raise ValidationError(f"{field_name} must be a positive whole number")
    return int(value)


def require_non_negative(value: DecimalLike, field_name: str) -> Decimal:
    amount = to_decimal(value)
    if amount < 0:
        raise ValidationError(f"{field_name} cannot be negative")
    return amount
