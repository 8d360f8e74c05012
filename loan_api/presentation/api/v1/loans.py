"""Loan application API endpoints."""

from typing import Annotated, List

from fastapi import APIRouter, Depends, Path

from loan_api.application.dto import CreateLoanRequest, LoanDataItem, SaveLoanDataRequest
from loan_api.application.services import LoanService
from loan_api.core.dependencies import get_current_user, get_loan_service
from loan_api.domain.entities import User
from loan_api.presentation.schemas import (
    ApiResponse,
    CreateLoanRequestSchema,
    ErrorResponseSchema,
    LoanResponseSchema,
    SaveLoanDataRequestSchema,
)

loan_router = APIRouter(
    prefix="/loans",
    responses={
        400: {"model": ErrorResponseSchema, "description": "Invalid request or missing tenant"},
        401: {"model": ErrorResponseSchema, "description": "Missing or invalid bearer token"},
        404: {"model": ErrorResponseSchema, "description": "Tenant or resource not found"},
    },
)


@loan_router.post(
    "",
    response_model=ApiResponse[LoanResponseSchema],
    status_code=201,
    summary="Create Loan Application",
    description="""Open a loan application in `pending` for one of the tenant's loan types""",
)
async def create_loan(
    request: CreateLoanRequestSchema,
    user: Annotated[User, Depends(get_current_user)],
    loan_service: Annotated[LoanService, Depends(get_loan_service)],
) -> ApiResponse[LoanResponseSchema]:
    response = await loan_service.create_loan(
        user,
        CreateLoanRequest(loan_type_id=request.loan_type_id),
    )

    return ApiResponse[LoanResponseSchema](
        message="loan application created",
        data=LoanResponseSchema.model_validate(response),
    )


@loan_router.post(
    "/data",
    response_model=ApiResponse[LoanResponseSchema],
    summary="Save Loan Data",
    description="""
    Submit the answers of a loan application.

    The submitted set replaces every previously stored answer. The credit
    score and identity verification are recomputed from the submitted
    document fields, and the application status is updated.
    """,
    responses={
        409: {"model": ErrorResponseSchema, "description": "Application no longer accepts data"},
        500: {"model": ErrorResponseSchema, "description": "Identity verification failed technically"},
    },
)
async def save_loan_data(
    request: SaveLoanDataRequestSchema,
    user: Annotated[User, Depends(get_current_user)],
    loan_service: Annotated[LoanService, Depends(get_loan_service)],
) -> ApiResponse[LoanResponseSchema]:
    dto = SaveLoanDataRequest(
        loan_id=request.loan_id,
        data=tuple(
            LoanDataItem(
                form_id=item.form_id,
                key=item.key,
                value=item.value,
                index=item.index,
            )
            for item in request.data
        ),
    )

    response = await loan_service.save_loan_data(user, dto)

    return ApiResponse[LoanResponseSchema](
        message="loan data saved",
        data=LoanResponseSchema.model_validate(response),
    )


@loan_router.get(
    "/user",
    response_model=ApiResponse[List[LoanResponseSchema]],
    summary="List My Loans",
    description="""Retrieve every loan application of the authenticated user, newest first""",
)
async def get_user_loans(
    user: Annotated[User, Depends(get_current_user)],
    loan_service: Annotated[LoanService, Depends(get_loan_service)],
) -> ApiResponse[List[LoanResponseSchema]]:
    responses = await loan_service.get_user_loans(user)

    return ApiResponse[List[LoanResponseSchema]](
        message="loans retrieved",
        data=[LoanResponseSchema.model_validate(r) for r in responses],
    )


@loan_router.get(
    "/{loan_id}",
    response_model=ApiResponse[LoanResponseSchema],
    summary="Get Loan",
    description="""Retrieve a loan application with its borrower, loan type and data""",
)
async def get_loan(
    loan_id: Annotated[int, Path(gt=0, description="Loan identifier")],
    user: Annotated[User, Depends(get_current_user)],
    loan_service: Annotated[LoanService, Depends(get_loan_service)],
) -> ApiResponse[LoanResponseSchema]:
    response = await loan_service.get_loan(user, loan_id)

    return ApiResponse[LoanResponseSchema](
        message="loan retrieved",
        data=LoanResponseSchema.model_validate(response),
    )


@loan_router.post(
    "/{loan_id}/decision",
    response_model=ApiResponse[LoanResponseSchema],
    summary="Process Loan Decision",
    description="""
    Apply the approval rules to a completed application.

    Approved applications are disbursed immediately; a failed disbursement
    turns the outcome into a rejection.
    """,
    responses={
        409: {"model": ErrorResponseSchema, "description": "Application is not ready for a decision"},
    },
)
async def process_decision(
    loan_id: Annotated[int, Path(gt=0, description="Loan identifier")],
    user: Annotated[User, Depends(get_current_user)],
    loan_service: Annotated[LoanService, Depends(get_loan_service)],
) -> ApiResponse[LoanResponseSchema]:
    response = await loan_service.process_decision(user, loan_id)

    return ApiResponse[LoanResponseSchema](
        message=f"loan {response.status}",
        data=LoanResponseSchema.model_validate(response),
    )
