from __future__ import annotations

import io
from typing import Iterable

import pandas as pd

from .model import DepreciationPeriodResult

SCHEDULE_COLUMNS = [
    "period_start",
    "period_end",
    "monthly_amount",
    "accumulated",
    "net_book_value",
    "pro_rata_factor",
    "fully_depreciated",
]


def schedule_to_frame(schedule: Iterable[DepreciationPeriodResult]) -> pd.DataFrame:
    """One row per period, amounts as floats for spreadsheet consumers."""

    data = [
        {
            "period_start": r.period_start.strftime("%Y-%m-%d"),
            "period_end": r.period_end.strftime("%Y-%m-%d"),
            "monthly_amount": float(r.monthly_amount),
            "accumulated": float(r.new_accumulated_amount),
            "net_book_value": float(r.new_net_book_value),
            "pro_rata_factor": round(float(r.pro_rata_factor), 4),
            "fully_depreciated": bool(r.is_fully_depreciated),
        }
        for r in schedule
    ]
    return pd.DataFrame(data, columns=SCHEDULE_COLUMNS)


def export_schedule_xlsx(schedule: Iterable[DepreciationPeriodResult], *, sheet_name: str = "Depreciation") -> bytes:
    df = schedule_to_frame(schedule)

    output = io.BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name=sheet_name)
    return output.getvalue()
