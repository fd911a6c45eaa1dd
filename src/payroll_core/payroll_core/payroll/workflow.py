from __future__ import annotations

from ..core.enums import PayrollStatus

PAYROLL_TRANSITIONS: dict[PayrollStatus, frozenset[PayrollStatus]] = {
    PayrollStatus.DRAFT: frozenset({PayrollStatus.PENDING_APPROVAL, PayrollStatus.CANCELLED}),
    PayrollStatus.PENDING_APPROVAL: frozenset(
        {PayrollStatus.APPROVED, PayrollStatus.DRAFT, PayrollStatus.CANCELLED}
    ),
    PayrollStatus.APPROVED: frozenset(
        {PayrollStatus.PROCESSED, PayrollStatus.PENDING_APPROVAL, PayrollStatus.CANCELLED}
    ),
    PayrollStatus.PROCESSED: frozenset({PayrollStatus.PAID, PayrollStatus.APPROVED}),
    # Terminal.
    PayrollStatus.PAID: frozenset(),
    PayrollStatus.CANCELLED: frozenset({PayrollStatus.DRAFT}),
}


def can_transition_to(current: PayrollStatus, new: PayrollStatus) -> bool:
    return PayrollStatus(new) in PAYROLL_TRANSITIONS.get(PayrollStatus(current), frozenset())
