"""Application services (use cases)."""

from .catalog_service import CatalogService
from .identity_service import IdentityVerifier
from .loan_service import LoanService

__all__ = [
    "CatalogService",
    "IdentityVerifier",
    "LoanService",
]
