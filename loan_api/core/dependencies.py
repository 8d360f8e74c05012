"""Dependency injection for FastAPI."""

from typing import Annotated, Optional

import structlog
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from loan_api.application.services import CatalogService, IdentityVerifier, LoanService
from loan_api.core.config import Settings, get_settings
from loan_api.core.security import decode_access_token, extract_user_id
from loan_api.domain.entities import Tenant, User
from loan_api.domain.exceptions import (
    AuthenticationException,
    TenantNotFoundException,
    TenantRequiredException,
)
from loan_api.domain.interfaces import (
    CreditBureauClient,
    DisbursementClient,
    LoanRepository,
    LoanTypeRepository,
    TenantRepository,
    UserRepository,
)
from loan_api.infrastructure.clients import (
    SimulatedCreditBureauClient,
    SimulatedDisbursementClient,
)
from loan_api.infrastructure.database import get_db_session
from loan_api.infrastructure.repositories import (
    PostgresLoanRepository,
    PostgresLoanTypeRepository,
    PostgresTenantRepository,
    PostgresUserRepository,
)
from loan_api.service.lending import LendingSettings, get_lending_settings

bearer_scheme = HTTPBearer(auto_error=False)


# Repository dependencies
async def get_loan_repository(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> LoanRepository:
    """Get a LoanRepository instance."""
    return PostgresLoanRepository(session)


async def get_loan_type_repository(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> LoanTypeRepository:
    """Get a LoanTypeRepository instance."""
    return PostgresLoanTypeRepository(session)


async def get_user_repository(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> UserRepository:
    """Get a UserRepository instance."""
    return PostgresUserRepository(session)


async def get_tenant_repository(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> TenantRepository:
    """Get a TenantRepository instance."""
    return PostgresTenantRepository(session)


# External client dependencies
def get_credit_bureau_client(
    lending: Annotated[LendingSettings, Depends(get_lending_settings)],
) -> CreditBureauClient:
    """Get a CreditBureauClient instance."""
    return SimulatedCreditBureauClient(settings=lending)


def get_disbursement_client(
    lending: Annotated[LendingSettings, Depends(get_lending_settings)],
) -> DisbursementClient:
    """Get a DisbursementClient instance."""
    return SimulatedDisbursementClient(settings=lending)


# Service dependencies
async def get_catalog_service(
    loan_type_repo: Annotated[LoanTypeRepository, Depends(get_loan_type_repository)],
) -> CatalogService:
    """Get a CatalogService instance."""
    return CatalogService(loan_type_repository=loan_type_repo)


async def get_identity_verifier(
    user_repo: Annotated[UserRepository, Depends(get_user_repository)],
) -> IdentityVerifier:
    """Get an IdentityVerifier instance."""
    return IdentityVerifier(user_repository=user_repo)


async def get_loan_service(
    loan_repo: Annotated[LoanRepository, Depends(get_loan_repository)],
    catalog_service: Annotated[CatalogService, Depends(get_catalog_service)],
    identity_verifier: Annotated[IdentityVerifier, Depends(get_identity_verifier)],
    credit_bureau: Annotated[CreditBureauClient, Depends(get_credit_bureau_client)],
    disbursement_client: Annotated[DisbursementClient, Depends(get_disbursement_client)],
    lending: Annotated[LendingSettings, Depends(get_lending_settings)],
) -> LoanService:
    """Get a LoanService instance with all dependencies."""
    return LoanService(
        loan_repository=loan_repo,
        catalog_service=catalog_service,
        identity_verifier=identity_verifier,
        credit_bureau=credit_bureau,
        disbursement_client=disbursement_client,
        settings=lending,
    )


# Request identity
async def get_current_tenant(
    request: Request,
    settings: Annotated[Settings, Depends(get_settings)],
    tenant_repo: Annotated[TenantRepository, Depends(get_tenant_repository)],
) -> Tenant:
    """
    Resolve the tenant named by the tenant header.

    Numeric values are looked up as tenant ids, anything else as a tenant code.

    Raises:
        TenantRequiredException: If the header is missing or blank
        TenantNotFoundException: If no active tenant matches
    """
    tenant_ref = (request.headers.get(settings.tenant_header) or "").strip()
    if not tenant_ref:
        raise TenantRequiredException(settings.tenant_header)

    tenant: Optional[Tenant]
    if tenant_ref.isdigit():
        tenant = await tenant_repo.get_by_id(int(tenant_ref))
    else:
        tenant = await tenant_repo.get_by_code(tenant_ref)

    if tenant is None or not tenant.is_active:
        raise TenantNotFoundException(tenant_ref)

    structlog.contextvars.bind_contextvars(tenant_id=tenant.id)
    return tenant


async def get_current_user(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(bearer_scheme)],
    tenant: Annotated[Tenant, Depends(get_current_tenant)],
    settings: Annotated[Settings, Depends(get_settings)],
    user_repo: Annotated[UserRepository, Depends(get_user_repository)],
) -> User:
    """
    Resolve the authenticated user from the bearer token.

    Raises:
        AuthenticationException: If the token is missing or invalid, or the
            user does not exist within the tenant
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationException("Authentication required")

    claims = decode_access_token(credentials.credentials, settings)
    user_id = extract_user_id(claims)

    user = await user_repo.get_by_id(user_id)
    if user is None or user.tenant_id != tenant.id:
        raise AuthenticationException("User is not registered with this tenant")

    structlog.contextvars.bind_contextvars(user_id=user.id)
    return user
