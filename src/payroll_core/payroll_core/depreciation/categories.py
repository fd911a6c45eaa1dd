"""Qatar Tax Authority depreciation categories.

The annual rate and the useful life are two views of the same setting:
rate = 100 / years and years = 100 / rate.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from ..common.money import DecimalLike, round_money, to_decimal
from .model import DepreciationCategory

QATAR_DEPRECIATION_CATEGORIES: tuple[DepreciationCategory, ...] = (
    DepreciationCategory("BUILDINGS", "Buildings", Decimal("4"), 25, "Permanent structures"),
    DepreciationCategory("MACHINERY", "Machinery & Equipment", Decimal("20"), 5),
    DepreciationCategory("VEHICLES", "Vehicles", Decimal("20"), 5),
    DepreciationCategory("FURNITURE", "Furniture & Fixtures", Decimal("20"), 5),
    DepreciationCategory("IT_EQUIPMENT", "IT Equipment", Decimal("20"), 5, "Computers, servers, network gear"),
    DepreciationCategory("INTANGIBLE", "Intangible Assets", Decimal("0"), 0, "Useful life set per asset"),
)


def get_category(code: str) -> Optional[DepreciationCategory]:
    key = (code or "").strip().upper()
    for category in QATAR_DEPRECIATION_CATEGORIES:
        if category.code == key:
            return category
    return None


def rate_from_useful_life(useful_life_years: int) -> Decimal:
    if useful_life_years <= 0:
        return Decimal("0")
    return round_money(Decimal(100) / Decimal(useful_life_years))


def useful_life_from_rate(annual_rate: DecimalLike) -> int:
    rate = to_decimal(annual_rate)
    if rate <= 0:
        return 0
    return int((Decimal(100) / rate).to_integral_value(rounding=ROUND_HALF_UP))


def useful_life_months(category: DepreciationCategory, custom_months: Optional[int] = None) -> int:
    """Per-asset override wins; otherwise the category's life in months."""

    if custom_months:
        return int(custom_months)
    return max(0, category.useful_life_years) * 12
