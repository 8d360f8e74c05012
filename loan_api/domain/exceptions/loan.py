"""Loan-related domain exceptions."""

from typing import Iterable, Optional

from .base import DomainException


class LoanNotFoundException(DomainException):
    """Raised when a loan cannot be found."""

    def __init__(self, loan_id: int):
        super().__init__(
            message=f"Loan not found: {loan_id}",
            code="LOAN_NOT_FOUND",
        )
        self.loan_id = loan_id


class InvalidLoanRequestException(DomainException):
    """Raised when a loan request is malformed or misses required fields."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(
            message=message,
            code="INVALID_LOAN_REQUEST",
            details=details,
        )


class InvalidLoanStateException(DomainException):
    """Raised when an operation is not allowed in the loan's current status."""

    def __init__(self, loan_id: int, status: str, message: str):
        super().__init__(
            message=message,
            code="INVALID_LOAN_STATE",
            details=f"loan {loan_id} is {status}",
        )
        self.loan_id = loan_id
        self.status = status


class IncompleteEvaluationException(DomainException):
    """Raised when a decision is requested before scoring and identity checks ran."""

    def __init__(self, loan_id: int, missing: Iterable[str]):
        missing = list(missing)
        super().__init__(
            message="the application must have a credit score and identity verification",
            code="INCOMPLETE_EVALUATION",
            details="missing: " + ", ".join(missing),
        )
        self.loan_id = loan_id
        self.missing = missing
