"""Domain Exceptions - Business rule violations and domain errors."""

from .base import DomainException
from .catalog import LoanTypeNotFoundException, LoanTypeVersionNotFoundException
from .identity import (
    AuthenticationException,
    IdentityVerificationException,
    TenantNotFoundException,
    TenantRequiredException,
    UserNotFoundException,
)
from .loan import (
    IncompleteEvaluationException,
    InvalidLoanRequestException,
    InvalidLoanStateException,
    LoanNotFoundException,
)
from .persistence import PersistenceException

__all__ = [
    "DomainException",
    "LoanTypeNotFoundException",
    "LoanTypeVersionNotFoundException",
    "AuthenticationException",
    "IdentityVerificationException",
    "TenantNotFoundException",
    "TenantRequiredException",
    "UserNotFoundException",
    "IncompleteEvaluationException",
    "InvalidLoanRequestException",
    "InvalidLoanStateException",
    "LoanNotFoundException",
    "PersistenceException",
]
