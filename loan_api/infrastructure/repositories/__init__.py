"""Repository implementations."""

from .loan_repository import PostgresLoanRepository
from .loan_type_repository import PostgresLoanTypeRepository
from .user_repository import PostgresTenantRepository, PostgresUserRepository

__all__ = [
    "PostgresLoanRepository",
    "PostgresLoanTypeRepository",
    "PostgresTenantRepository",
    "PostgresUserRepository",
]
