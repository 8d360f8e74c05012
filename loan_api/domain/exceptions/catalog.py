"""Catalog-related domain exceptions."""

from .base import DomainException


class LoanTypeNotFoundException(DomainException):
    """Raised when a loan type is missing, inactive or owned by another tenant."""

    def __init__(self, loan_type_id: int):
        super().__init__(
            message=f"Loan type not found: {loan_type_id}",
            code="LOAN_TYPE_NOT_FOUND",
        )
        self.loan_type_id = loan_type_id


class LoanTypeVersionNotFoundException(DomainException):
    """Raised when a loan type has no version that is both active and default."""

    def __init__(self, loan_type_id: int):
        super().__init__(
            message=f"No active default version for loan type: {loan_type_id}",
            code="LOAN_TYPE_VERSION_NOT_FOUND",
        )
        self.loan_type_id = loan_type_id
