"""User, tenant and identity related domain exceptions."""

from .base import DomainException


class UserNotFoundException(DomainException):
    """Raised when a user is not found."""

    def __init__(self, user_id: int):
        super().__init__(
            message=f"User not found: {user_id}",
            code="USER_NOT_FOUND",
        )
        self.user_id = user_id


class TenantNotFoundException(DomainException):
    """Raised when the requested tenant is unknown or inactive."""

    def __init__(self, tenant_ref: str):
        super().__init__(
            message=f"Tenant not found: {tenant_ref}",
            code="TENANT_NOT_FOUND",
        )
        self.tenant_ref = tenant_ref


class TenantRequiredException(DomainException):
    """Raised when a request does not identify its tenant."""

    def __init__(self, header_name: str):
        super().__init__(
            message=f"{header_name} header is required",
            code="TENANT_REQUIRED",
        )


class AuthenticationException(DomainException):
    """Raised when the caller cannot be identified."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(
            message=message,
            code="UNAUTHORIZED",
        )


class IdentityVerificationException(DomainException):
    """
    Raised when identity verification cannot be performed.

    This is a technical failure (missing inputs, user record unavailable),
    distinct from a verification that ran and did not match.
    """

    def __init__(self, message: str):
        super().__init__(
            message=message,
            code="IDENTITY_VERIFICATION_ERROR",
        )
