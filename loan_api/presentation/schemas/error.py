"""Pydantic schema for API error responses."""

from typing import Optional

from pydantic import BaseModel, Field


class ErrorDetailSchema(BaseModel):
    code: str = Field(
        ...,
        description="Error code",
        examples=["LOAN_NOT_FOUND"],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
        examples=["Loan not found: 42"],
    )
    details: Optional[str] = Field(
        None,
        description="Additional context about the failure",
    )


class ErrorResponseSchema(BaseModel):
    """Standard error response format for all API errors."""
    success: bool = Field(False, description="Always false for errors")
    message: str = Field(
        ...,
        description="Human-readable error message",
        examples=["Loan not found: 42"],
    )
    error: ErrorDetailSchema
    request_id: str | None = Field(
        None,
        description="Request ID for tracing",
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "success": False,
                    "message": "Loan not found: 42",
                    "error": {
                        "code": "LOAN_NOT_FOUND",
                        "message": "Loan not found: 42",
                        "details": None,
                    },
                    "request_id": "abc123",
                }
            ]
        }
    }
