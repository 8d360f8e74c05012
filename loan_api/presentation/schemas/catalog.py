"""Loan catalog Pydantic schemas."""

from decimal import Decimal
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict


class FormInputSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = None
    code: str
    label: str
    input_type: str
    placeholder: str
    default_value: str
    validation_rules: Any = None
    options: Any = None
    config: Any = None
    order: int
    is_required: bool
    is_active: bool


class FormSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = None
    code: str
    label: str
    description: str
    order: int
    is_required: bool
    is_active: bool
    config: Any = None
    inputs: List[FormInputSchema]


class CatalogVersionSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = None
    version: str
    description: str
    is_active: bool
    is_default: bool
    config: Any = None
    forms: List[FormSchema]


class LoanTypeDetailSchema(BaseModel):
    """Schema for GET /v1/loan-types/{loan_type_id} response data."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    tenant_id: int
    name: str
    code: str
    description: str
    min_amount: Decimal
    max_amount: Decimal
    version: CatalogVersionSchema
