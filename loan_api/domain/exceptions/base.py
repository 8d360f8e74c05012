"""Base domain exception."""

from typing import Optional


class DomainException(Exception):
    """
    Base exception for all domain-level errors.

    Domain exceptions represent business rule violations or
    domain-specific error conditions.
    """

    def __init__(
        self,
        message: str,
        code: str = "DOMAIN_ERROR",
        details: Optional[str] = None,
    ):
        self.message = message
        self.code = code
        self.details = details
        super().__init__(self.message)
