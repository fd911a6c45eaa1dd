from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import LeaveRequest


class LeaveRequestRepository(Protocol):
    def list_approved_unpaid_overlapping(
        self,
        *,
        member_id: str,
        tenant_id: str,
        period_start: date,
        period_end: date,
    ) -> Sequence[LeaveRequest]:
        """APPROVED requests on unpaid leave types whose range touches the period."""

        raise NotImplementedError
