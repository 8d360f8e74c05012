"""Domain Entities - Core business objects."""

from .catalog import FormInput, LoanType, LoanTypeForm, LoanTypeVersion
from .loan import Loan, LoanData, LoanStatus
from .tenant import Tenant
from .user import DocumentType, User

__all__ = [
    "FormInput",
    "LoanType",
    "LoanTypeForm",
    "LoanTypeVersion",
    "Loan",
    "LoanData",
    "LoanStatus",
    "Tenant",
    "DocumentType",
    "User",
]
