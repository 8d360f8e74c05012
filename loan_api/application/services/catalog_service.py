"""Catalog service - resolves loan products and their active form versions."""

from typing import Optional

from loan_api.application.dto import LoanTypeDetailResponse
from loan_api.domain.entities import LoanType, LoanTypeVersion
from loan_api.domain.exceptions import (
    LoanTypeNotFoundException,
    LoanTypeVersionNotFoundException,
)
from loan_api.domain.interfaces import LoanTypeRepository


class CatalogService:
    """
    Application service for the loan product catalog.
    """

    def __init__(self, loan_type_repository: LoanTypeRepository):
        self._loan_type_repo = loan_type_repository

    async def get_loan_type(
        self,
        loan_type_id: int,
        tenant_id: Optional[int] = None,
    ) -> LoanType:
        """
        Get an active loan type.

        Args:
            loan_type_id: The loan type's identifier
            tenant_id: When given, the loan type must belong to this tenant

        Raises:
            LoanTypeNotFoundException: If the loan type is missing, inactive
                or owned by another tenant
        """
        loan_type = await self._loan_type_repo.get_by_id(loan_type_id)
        if loan_type is None:
            raise LoanTypeNotFoundException(loan_type_id)

        if tenant_id is not None and loan_type.tenant_id != tenant_id:
            raise LoanTypeNotFoundException(loan_type_id)

        return loan_type

    async def get_active_version_with_forms(self, loan_type_id: int) -> LoanTypeVersion:
        """
        Get the active default version of a loan type with its active forms and inputs.

        Raises:
            LoanTypeNotFoundException: If the loan type is missing or inactive
            LoanTypeVersionNotFoundException: If no version is both active and default
        """
        loan_type = await self.get_loan_type(loan_type_id)
        return self._current_version(loan_type)

    async def get_loan_type_detail(
        self,
        loan_type_id: int,
        tenant_id: int,
    ) -> LoanTypeDetailResponse:
        """Get a tenant's loan type with its resolved form catalog."""
        loan_type = await self.get_loan_type(loan_type_id, tenant_id=tenant_id)
        return LoanTypeDetailResponse.from_entity(loan_type, self._current_version(loan_type))

    def _current_version(self, loan_type: LoanType) -> LoanTypeVersion:
        version = loan_type.current_version
        if version is None:
            raise LoanTypeVersionNotFoundException(loan_type.id)
        return version
