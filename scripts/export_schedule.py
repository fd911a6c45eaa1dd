"""Export a projected depreciation schedule to an Excel workbook.

Example:
    python scripts/export_schedule.py --cost 12000 --life 60 --start 2025-01-15 -o laptop.xlsx
"""

from __future__ import annotations

import argparse
import importlib
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.payroll_core.payroll_core.common.datetime_utils import parse_iso_date
from src.payroll_core.payroll_core.common.money import to_decimal
from src.payroll_core.payroll_core.depreciation.calculator import generate_depreciation_schedule
from src.payroll_core.payroll_core.depreciation.categories import get_category, useful_life_months
from src.payroll_core.payroll_core.depreciation.model import DepreciationInput
from src.payroll_core.payroll_core.depreciation.report import export_schedule_xlsx

logger = logging.getLogger("export_schedule")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--cost", required=True, help="acquisition cost")
    parser.add_argument("--salvage", default="0", help="salvage value (default 0)")
    parser.add_argument("--start", required=True, help="depreciation start date, YYYY-MM-DD")
    parser.add_argument("--accumulated", default="0", help="depreciation already booked")
    life = parser.add_mutually_exclusive_group(required=True)
    life.add_argument("--life", type=int, help="useful life in months")
    life.add_argument("--category", help="tax category code, e.g. IT_EQUIPMENT")
    parser.add_argument("-o", "--output", default="depreciation_schedule.xlsx")
    return parser


def main(argv=None) -> None:
    args = build_parser().parse_args(argv)

    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    logging.basicConfig(level=settings.LOG_LEVEL, format=settings.LOG_FORMAT)

    if args.category:
        category = get_category(args.category)
        if category is None:
            raise SystemExit(f"Unknown depreciation category: {args.category}")
        months = useful_life_months(category)
    else:
        months = args.life

    asset = DepreciationInput(
        acquisition_cost=to_decimal(args.cost),
        salvage_value=to_decimal(args.salvage),
        useful_life_months=months,
        depreciation_start_date=parse_iso_date(args.start),
        accumulated_depreciation=to_decimal(args.accumulated),
    )
    schedule = generate_depreciation_schedule(asset, max_periods=settings.DEPRECIATION_MAX_PERIODS)
    if not schedule:
        raise SystemExit("Nothing to depreciate for this asset.")

    out_file = Path(args.output)
    out_file.write_bytes(export_schedule_xlsx(schedule))
    logger.info("Wrote %d periods to %s", len(schedule), out_file)
    print(f"OK: {len(schedule)} periods -> {out_file}")


if __name__ == "__main__":
    main()
