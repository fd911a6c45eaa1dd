from __future__ import annotations

from enum import Enum


class LeaveStatus(str, Enum):
    """Leave request workflow status as stored in the database."""

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
    CANCELLED = "CANCELLED"


class LeaveRequestType(str, Enum):
    FULL_DAY = "FULL_DAY"
    HALF_DAY_AM = "HALF_DAY_AM"
    HALF_DAY_PM = "HALF_DAY_PM"

    @property
    def is_half_day(self) -> bool:
        return self in (LeaveRequestType.HALF_DAY_AM, LeaveRequestType.HALF_DAY_PM)


class PayrollStatus(str, Enum):
    """Payroll run lifecycle."""

    DRAFT = "DRAFT"
    PENDING_APPROVAL = "PENDING_APPROVAL"
    APPROVED = "APPROVED"
    PROCESSED = "PROCESSED"
    PAID = "PAID"
    CANCELLED = "CANCELLED"


class BillingCycle(str, Enum):
    """Subscription billing frequency."""

    WEEKLY = "WEEKLY"
    MONTHLY = "MONTHLY"
    QUARTERLY = "QUARTERLY"
    SEMI_ANNUALLY = "SEMI_ANNUALLY"
    YEARLY = "YEARLY"
    ONE_TIME = "ONE_TIME"

    @classmethod
    def parse(cls, value: "BillingCycle | str") -> "BillingCycle | None":
        """Accept enum members and the spellings found in imported data."""

        if isinstance(value, BillingCycle):
            return value
        key = str(value).strip().upper().replace("-", "_")
        key = {"ANNUALLY": "YEARLY", "ANNUAL": "YEARLY"}.get(key, key)
        try:
            return cls(key)
        except ValueError:
            return None
