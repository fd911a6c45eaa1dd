from __future__ import annotations

from ..common.validators import require_non_empty, require_positive_int


def generate_payroll_reference(prefix: str, year: int, month: int, sequence: int) -> str:
    """``BCE-PAY-2024-12-001``"""
    prefix = require_non_empty(prefix, "prefix").upper()
    return f"{prefix}-PAY-{int(year)}-{int(month):02d}-{require_positive_int(sequence, 'sequence'):03d}"


def generate_payslip_number(prefix: str, year: int, month: int, sequence: int) -> str:
    """``BCE-PS-2024-12-00001``"""
    prefix = require_non_empty(prefix, "prefix").upper()
    return f"{prefix}-PS-{int(year)}-{int(month):02d}-{require_positive_int(sequence, 'sequence'):05d}"


def generate_loan_number(prefix: str, sequence: int) -> str:
    """``BCE-LOAN-00001``"""
    prefix = require_non_empty(prefix, "prefix").upper()
    return f"{prefix}-LOAN-{require_positive_int(sequence, 'sequence'):05d}"


def generate_leave_request_number(existing_count: int) -> str:
    """``LR-00001`` for the first request of a tenant."""
    return f"LR-{max(0, int(existing_count)) + 1:05d}"
