"""Storage-related domain exceptions."""

from typing import Optional

from .base import DomainException


class PersistenceException(DomainException):
    """Raised when a read or write against the store fails."""

    def __init__(self, operation: str, details: Optional[str] = None):
        super().__init__(
            message=f"Database operation failed: {operation}",
            code="PERSISTENCE_ERROR",
            details=details,
        )
        self.operation = operation
