"""Loan catalog API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path

from loan_api.application.services import CatalogService
from loan_api.core.dependencies import get_catalog_service, get_current_user
from loan_api.domain.entities import User
from loan_api.presentation.schemas import (
    ApiResponse,
    ErrorResponseSchema,
    LoanTypeDetailSchema,
)

loan_type_router = APIRouter(prefix="/loan-types")


@loan_type_router.get(
    "/{loan_type_id}",
    response_model=ApiResponse[LoanTypeDetailSchema],
    summary="Get Loan Type",
    description="""
    Retrieve a loan type of the caller's tenant with its current form catalog.

    Only the active default version is returned, with its active forms
    and inputs ordered for display.
    """,
    responses={
        200: {"description": "Loan type retrieved successfully"},
        404: {"model": ErrorResponseSchema, "description": "Loan type or version not found"},
    },
)
async def get_loan_type(
    loan_type_id: Annotated[int, Path(gt=0, description="Loan type identifier")],
    user: Annotated[User, Depends(get_current_user)],
    catalog_service: Annotated[CatalogService, Depends(get_catalog_service)],
) -> ApiResponse[LoanTypeDetailSchema]:
    response = await catalog_service.get_loan_type_detail(loan_type_id, tenant_id=user.tenant_id)

    return ApiResponse[LoanTypeDetailSchema](
        message="loan type retrieved",
        data=LoanTypeDetailSchema.model_validate(response),
    )
