"""Data Transfer Objects for application layer."""

from .catalog import CatalogVersionDTO, FormDTO, FormInputDTO, LoanTypeDetailResponse
from .loan import (
    CreateLoanRequest,
    LoanDataDTO,
    LoanDataItem,
    LoanResponse,
    LoanTypeSummaryDTO,
    SaveLoanDataRequest,
    UserSummaryDTO,
)

__all__ = [
    "CatalogVersionDTO",
    "FormDTO",
    "FormInputDTO",
    "LoanTypeDetailResponse",
    "CreateLoanRequest",
    "LoanDataDTO",
    "LoanDataItem",
    "LoanResponse",
    "LoanTypeSummaryDTO",
    "SaveLoanDataRequest",
    "UserSummaryDTO",
]
