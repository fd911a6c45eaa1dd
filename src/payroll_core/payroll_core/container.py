from __future__ import annotations

from dataclasses import dataclass

from .database.connection import DBConfig, DatabaseConnection
from .leave.mysql_leave_repository import MySQLLeaveRequestRepository
from .payroll.service import UnpaidLeaveDeductionService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    leave_requests_repo: MySQLLeaveRequestRepository

    deduction_service: UnpaidLeaveDeductionService


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    leave_requests_repo = MySQLLeaveRequestRepository(conn)
    deduction_service = UnpaidLeaveDeductionService(leave_requests_repo)

    return Container(
        conn=conn,
        leave_requests_repo=leave_requests_repo,
        deduction_service=deduction_service,
    )
