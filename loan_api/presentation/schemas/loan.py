"""Loan-related Pydantic schemas."""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CreateLoanRequestSchema(BaseModel):
    """Schema for POST /v1/loans request body."""

    model_config = ConfigDict(
        json_schema_extra={"examples": [{"loan_type_id": 1}]}
    )
    loan_type_id: int = Field(
        ...,
        gt=0,
        description="Loan product to apply for",
        examples=[1],
    )


class LoanDataItemSchema(BaseModel):
    """A single answer within a data submission."""

    form_id: int = Field(..., ge=0, description="Form the answer belongs to")
    key: str = Field(
        ...,
        min_length=1,
        max_length=100,
        description="Code of the form input being answered",
        examples=["document_number"],
    )
    value: str = Field("", description="Submitted value", examples=["1234567898"])
    index: int = Field(0, ge=0, description="Position within a repeatable group")

    @field_validator("key")
    @classmethod
    def validate_key(cls, v: str) -> str:
        """Ensure key is not just whitespace."""
        if not v.strip():
            raise ValueError("key cannot be empty or whitespace")
        return v.strip()

    @field_validator("value", mode="before")
    @classmethod
    def coerce_value(cls, v):
        """Accept numbers and booleans, store everything as text."""
        if v is None:
            return ""
        if isinstance(v, bool):
            return "true" if v else "false"
        if isinstance(v, (int, float)):
            return str(v)
        return v


class SaveLoanDataRequestSchema(BaseModel):
    """Schema for POST /v1/loans/data request body."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "loan_id": 1,
                    "data": [
                        {"form_id": 1, "key": "full_name", "value": "Juan Perez Gomez", "index": 0},
                        {"form_id": 1, "key": "document_type", "value": "cedula", "index": 0},
                        {"form_id": 1, "key": "document_number", "value": "1234567898", "index": 0},
                    ],
                }
            ]
        }
    )
    loan_id: int = Field(..., gt=0, description="Loan application to update")
    data: List[LoanDataItemSchema] = Field(
        default_factory=list,
        description="Complete set of answers; replaces anything stored before",
    )


class LoanDataSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = None
    form_id: int
    key: str
    value: str
    index: int


class UserSummarySchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    phone: str
    document_type: str
    document_number: str


class LoanTypeSummarySchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    code: str
    description: str
    min_amount: Decimal
    max_amount: Decimal


class LoanResponseSchema(BaseModel):
    """Schema for a loan application in responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="Loan identifier")
    loan_type_id: int
    user_id: int
    status: str = Field(
        ...,
        description="pending, on_progress, completed, approved or rejected",
        examples=["on_progress"],
    )
    observation: str = Field(..., description="Human-readable rationale of the current status")
    amount_approved: Decimal = Field(..., description="Amount granted (0 until approved)")
    credit_score: Optional[int] = Field(None, ge=300, le=850)
    identity_verified: Optional[bool] = None
    created_at: datetime
    updated_at: datetime
    data: List[LoanDataSchema] = Field(default_factory=list)
    user: Optional[UserSummarySchema] = None
    loan_type: Optional[LoanTypeSummarySchema] = None
