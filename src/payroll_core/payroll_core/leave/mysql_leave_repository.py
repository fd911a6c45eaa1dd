from __future__ import annotations

import logging
from datetime import date
from typing import Sequence

import mysql.connector

from ..core.enums import LeaveRequestType, LeaveStatus
from ..core.exceptions import RepositoryError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, normalize_mysql_date, normalize_mysql_decimal
from .model import LeaveRequest, LeaveType
from .repository import LeaveRequestRepository

logger = logging.getLogger(__name__)


class MySQLLeaveRequestRepository(LeaveRequestRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_approved_unpaid_overlapping(
        self,
        *,
        member_id: str,
        tenant_id: str,
        period_start: date,
        period_end: date,
    ) -> Sequence[LeaveRequest]:
        logger.debug(
            "Loading unpaid leave for member=%s tenant=%s period=%s..%s",
            member_id, tenant_id, period_start, period_end,
        )
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    SELECT r.id, r.request_number, r.member_id, r.tenant_id,
                           r.status, r.start_date, r.end_date, r.total_days,
                           r.request_type, t.name AS leave_type_name, t.is_paid
                    FROM leave_requests r
                    JOIN leave_types t ON t.id = r.leave_type_id
                    WHERE r.tenant_id=%s
                      AND r.member_id=%s
                      AND r.status=%s
                      AND t.is_paid=0
                      AND r.start_date <= %s
                      AND r.end_date >= %s
                    ORDER BY r.start_date ASC
                    """,
                    (
                        str(tenant_id),
                        str(member_id),
                        LeaveStatus.APPROVED.value,
                        period_end,
                        period_start,
                    ),
                )
                rows = fetchall(cur)
        except mysql.connector.Error as exc:
            logger.error("Leave request lookup failed for member=%s tenant=%s: %s", member_id, tenant_id, exc)
            raise RepositoryError("Could not load leave requests") from exc

        return [self._to_model(r) for r in rows]

    @staticmethod
    def _to_model(r: dict) -> LeaveRequest:
        return LeaveRequest(
            id=str(r["id"]),
            request_number=str(r["request_number"]),
            member_id=str(r["member_id"]),
            tenant_id=str(r["tenant_id"]),
            status=LeaveStatus(r["status"]),
            start_date=normalize_mysql_date(r["start_date"]),
            end_date=normalize_mysql_date(r["end_date"]),
            total_days=normalize_mysql_decimal(r["total_days"]),
            leave_type=LeaveType(name=str(r["leave_type_name"]), is_paid=bool(r["is_paid"])),
            request_type=LeaveRequestType(r.get("request_type") or LeaveRequestType.FULL_DAY.value),
        )
