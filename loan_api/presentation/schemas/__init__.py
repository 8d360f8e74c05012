"""Pydantic schemas for API request/response validation."""

from .catalog import (
    CatalogVersionSchema,
    FormInputSchema,
    FormSchema,
    LoanTypeDetailSchema,
)
from .envelope import ApiResponse
from .error import ErrorDetailSchema, ErrorResponseSchema
from .loan import (
    CreateLoanRequestSchema,
    LoanDataItemSchema,
    LoanDataSchema,
    LoanResponseSchema,
    LoanTypeSummarySchema,
    SaveLoanDataRequestSchema,
    UserSummarySchema,
)

__all__ = [
    "CatalogVersionSchema",
    "FormInputSchema",
    "FormSchema",
    "LoanTypeDetailSchema",
    "ApiResponse",
    "ErrorDetailSchema",
    "ErrorResponseSchema",
    "CreateLoanRequestSchema",
    "LoanDataItemSchema",
    "LoanDataSchema",
    "LoanResponseSchema",
    "LoanTypeSummarySchema",
    "SaveLoanDataRequestSchema",
    "UserSummarySchema",
]
