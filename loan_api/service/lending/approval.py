"""
Approval rules for completed loan applications.

Rules are evaluated in order and the first match wins:
1. Identity not verified -> rejected
2. Credit score below the minimum -> rejected
3. Requested amount above repayment capacity with an insufficient score -> rejected
4. Requested amount below the product minimum -> rejected
5. Otherwise approved, with a reason that depends on the score band

The score band only changes the wording of the reason, never the outcome.
"""

from dataclasses import dataclass
from decimal import Decimal

from loan_api.domain.entities import LoanStatus

from .settings import LendingSettings, lending_settings


@dataclass(frozen=True)
class ApprovalOutcome:
    """
    Result of evaluating the approval rules.

    Attributes:
        status: approved or rejected
        reason: Human-readable rationale stored as the loan observation
    """
    status: LoanStatus
    reason: str

    @property
    def approved(self) -> bool:
        return self.status == LoanStatus.APPROVED


def repayment_capacity(
    monthly_income: Decimal,
    settings: LendingSettings = lending_settings,
) -> Decimal:
    """Largest amount the borrower can be lent given their monthly income."""
    return monthly_income * settings.repayment_capacity_ratio


def approval_reason(credit_score: int, settings: LendingSettings = lending_settings) -> str:
    if credit_score >= settings.excellent_score:
        band = "excellent credit score"
    elif credit_score >= settings.good_score:
        band = "good credit score"
    elif credit_score >= settings.acceptable_score:
        band = "acceptable credit score"
    else:
        band = "low but acceptable credit score"
    return f"loan approved: {band} ({credit_score})"


def evaluate_application(
    credit_score: int,
    identity_verified: bool,
    requested_amount: Decimal,
    monthly_income: Decimal,
    settings: LendingSettings = lending_settings,
) -> ApprovalOutcome:
    """
    Apply the approval rules to an evaluated application.

    Args:
        credit_score: Stored credit score of the loan
        identity_verified: Stored identity verification result
        requested_amount: Amount requested by the borrower
        monthly_income: Declared monthly income
        settings: Lending settings (uses defaults if not provided)

    Returns:
        ApprovalOutcome with the resulting status and reason
    """
    if not identity_verified:
        return ApprovalOutcome(
            LoanStatus.REJECTED,
            "loan rejected: identity verification failed",
        )

    if credit_score < settings.min_credit_score:
        return ApprovalOutcome(
            LoanStatus.REJECTED,
            f"loan rejected: credit score too low ({credit_score})",
        )

    if (
        requested_amount > repayment_capacity(monthly_income, settings)
        and credit_score < settings.capacity_override_score
    ):
        return ApprovalOutcome(
            LoanStatus.REJECTED,
            "loan rejected: amount exceeds repayment capacity and insufficient score",
        )

    if requested_amount < settings.min_requested_amount:
        return ApprovalOutcome(
            LoanStatus.REJECTED,
            "loan rejected: minimum amount not met",
        )

    return ApprovalOutcome(LoanStatus.APPROVED, approval_reason(credit_score, settings))


def calculate_approved_amount(
    requested_amount: Decimal,
    monthly_income: Decimal,
    settings: LendingSettings = lending_settings,
) -> Decimal:
    """
    Amount granted to an approved application.

    The requested amount is granted in full when it fits the repayment
    capacity; otherwise the capacity itself is granted.
    """
    return min(requested_amount, repayment_capacity(monthly_income, settings))
