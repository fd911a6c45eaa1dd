"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from decimal import Decimal

# Python weekday numbers (Monday=0). Qatar weekend is Friday + Saturday.
FRIDAY = 4
SATURDAY = 5
DEFAULT_WEEKEND_DAYS = (FRIDAY, SATURDAY)

# Qatar Labor Law: daily rate = monthly gross / 30, whatever the month length.
PAYROLL_DAYS_PER_MONTH = 30

MONEY_PLACES = Decimal("0.01")
HALF_DAY = Decimal("0.5")

# Sub-cent tolerance used when deciding an asset is fully depreciated.
DEPRECIATION_EPSILON = Decimal("0.005")
# 50 years of monthly periods.
DEPRECIATION_MAX_PERIODS = 600
# Average days per month used for disposal-date depreciation.
AVERAGE_DAYS_PER_MONTH = Decimal("30.44")
FULLY_DEPRECIATED_TOLERANCE = Decimal("0.01")

GRATUITY_WEEKS_PER_YEAR = 3
GRATUITY_MINIMUM_MONTHS = 12

# Months of service -> annual leave days (21 days after 1 year, 28 after 5).
DEFAULT_ANNUAL_LEAVE_TIERS = {12: 21, 60: 28}
DEFAULT_ANNUAL_ENTITLEMENT = 21
SENIOR_ANNUAL_ENTITLEMENT = 28
SENIOR_SERVICE_MONTHS = 60

DEFAULT_GRATUITY_PROJECTION_YEARS = (1, 3, 5, 10)
