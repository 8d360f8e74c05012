"""
Status transition rules of a loan application.

    pending -> on_progress -> completed -> approved | rejected

Data submissions move a loan between pending, on_progress and completed.
Only a decision moves a completed loan to a terminal state.
"""

from typing import Dict, FrozenSet, Optional

from loan_api.domain.entities import LoanStatus


ALLOWED_TRANSITIONS: Dict[LoanStatus, FrozenSet[LoanStatus]] = {
    LoanStatus.PENDING: frozenset(
        {LoanStatus.PENDING, LoanStatus.ON_PROGRESS, LoanStatus.COMPLETED}
    ),
    LoanStatus.ON_PROGRESS: frozenset(
        {LoanStatus.PENDING, LoanStatus.ON_PROGRESS, LoanStatus.COMPLETED}
    ),
    LoanStatus.COMPLETED: frozenset({LoanStatus.APPROVED, LoanStatus.REJECTED}),
    LoanStatus.APPROVED: frozenset(),
    LoanStatus.REJECTED: frozenset(),
}


def can_transition(current: LoanStatus, target: LoanStatus) -> bool:
    """Return True if a loan in ``current`` may move to ``target``."""
    return target in ALLOWED_TRANSITIONS[current]


def can_accept_data(status: LoanStatus) -> bool:
    """Data may only be (re)submitted while the application is being filled in."""
    return status.accepts_data


def determine_status(
    has_data: bool,
    is_complete: bool,
    credit_score: Optional[int],
    identity_verified: Optional[bool],
) -> LoanStatus:
    """
    Compute the status that follows a data submission.

    Args:
        has_data: Whether any answer is stored for the loan
        is_complete: Whether every required input has an answer
        credit_score: The loan's stored credit score
        identity_verified: The loan's stored identity verification result

    Returns:
        pending when nothing is stored, completed when the application is
        complete and both evaluations are known, on_progress otherwise
    """
    if not has_data:
        return LoanStatus.PENDING

    if is_complete and credit_score is not None and identity_verified is not None:
        return LoanStatus.COMPLETED

    return LoanStatus.ON_PROGRESS


def describe_status(
    status: LoanStatus,
    credit_score: Optional[int] = None,
    identity_verified: Optional[bool] = None,
) -> str:
    """Build the human-readable observation for a status reached by a data submission."""
    if status == LoanStatus.PENDING:
        return "application created, awaiting data"

    if status == LoanStatus.ON_PROGRESS:
        return "partial data saved, complete missing information"

    if status == LoanStatus.COMPLETED:
        observation = "application completed."
        if credit_score is not None:
            observation += f" Credit score: {credit_score}."
        if identity_verified is not None:
            result = "successful" if identity_verified else "failed"
            observation += f" Identity verification: {result}."
        return observation

    return ""
