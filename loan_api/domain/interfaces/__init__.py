"""
Domain Interfaces (Ports)
"""

from .repositories import (
    LoanRepository,
    LoanTypeRepository,
    TenantRepository,
    UserRepository,
)
from .clients import CreditBureauClient, DisbursementClient

__all__ = [
    "LoanRepository",
    "LoanTypeRepository",
    "TenantRepository",
    "UserRepository",
    "CreditBureauClient",
    "DisbursementClient",
]
