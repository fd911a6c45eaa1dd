from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from ..common.money import DecimalLike


@dataclass(frozen=True)
class DepreciationInput:
    acquisition_cost: DecimalLike
    salvage_value: DecimalLike
    useful_life_months: int
    depreciation_start_date: date
    accumulated_depreciation: DecimalLike = Decimal("0")


@dataclass(frozen=True)
class DepreciationPeriodResult:
    period_start: date
    period_end: date
    monthly_amount: Decimal
    new_accumulated_amount: Decimal
    new_net_book_value: Decimal
    pro_rata_factor: Decimal
    is_fully_depreciated: bool


@dataclass(frozen=True)
class DepreciationSummary:
    acquisition_cost: Decimal
    salvage_value: Decimal
    depreciable_amount: Decimal
    useful_life_months: int
    monthly_depreciation: Decimal
    annual_depreciation: Decimal
    accumulated_depreciation: Decimal
    net_book_value: Decimal
    remaining_months: int
    percent_depreciated: int
    is_fully_depreciated: bool


@dataclass(frozen=True)
class ProRataDepreciationResult:
    """Depreciation for an arbitrary day range, used on disposal."""

    days: int
    amount: Decimal
    new_accumulated_amount: Decimal
    new_net_book_value: Decimal
    daily_rate: Decimal
    period_start: date
    period_end: date


@dataclass(frozen=True)
class DepreciationCategory:
    code: str
    name: str
    annual_rate: Decimal
    useful_life_years: int
    description: Optional[str] = None

    @property
    def is_custom_life(self) -> bool:
        """Categories with a 0% rate need a per-asset useful life."""
        return self.useful_life_years <= 0
