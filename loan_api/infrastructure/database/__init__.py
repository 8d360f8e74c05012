"""Database infrastructure."""

from .connection import get_db_session, DatabaseSessionManager, normalize_database_url
from .models import (
    Base,
    TenantModel,
    UserModel,
    LoanTypeModel,
    LoanTypeVersionModel,
    LoanTypeFormModel,
    LoanTypeFormInputModel,
    LoanModel,
    LoanDataModel,
)

__all__ = [
    "get_db_session",
    "DatabaseSessionManager",
    "normalize_database_url",
    "Base",
    "TenantModel",
    "UserModel",
    "LoanTypeModel",
    "LoanTypeVersionModel",
    "LoanTypeFormModel",
    "LoanTypeFormInputModel",
    "LoanModel",
    "LoanDataModel",
]
