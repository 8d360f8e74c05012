"""Data transfer objects for the loan product catalog."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, List, Optional


@dataclass(frozen=True)
class FormInputDTO:
    id: Optional[int]
    code: str
    label: str
    input_type: str
    placeholder: str
    default_value: str
    validation_rules: Any
    options: Any
    config: Any
    order: int
    is_required: bool
    is_active: bool


@dataclass(frozen=True)
class FormDTO:
    id: Optional[int]
    code: str
    label: str
    description: str
    order: int
    is_required: bool
    is_active: bool
    config: Any
    inputs: List[FormInputDTO]


@dataclass(frozen=True)
class CatalogVersionDTO:
    """The active default version of a loan type with its ordered forms."""

    id: Optional[int]
    version: str
    description: str
    is_active: bool
    is_default: bool
    config: Any
    forms: List[FormDTO]

    @classmethod
    def from_entity(cls, version) -> "CatalogVersionDTO":
        return cls(
            id=version.id,
            version=version.version,
            description=version.description,
            is_active=version.is_active,
            is_default=version.is_default,
            config=version.config,
            forms=[
                FormDTO(
                    id=form.id,
                    code=form.code,
                    label=form.label,
                    description=form.description,
                    order=form.order,
                    is_required=form.is_required,
                    is_active=form.is_active,
                    config=form.config,
                    inputs=[
                        FormInputDTO(
                            id=item.id,
                            code=item.code,
                            label=item.label,
                            input_type=item.input_type,
                            placeholder=item.placeholder,
                            default_value=item.default_value,
                            validation_rules=item.validation_rules,
                            options=item.options,
                            config=item.config,
                            order=item.order,
                            is_required=item.is_required,
                            is_active=item.is_active,
                        )
                        for item in form.inputs
                    ],
                )
                for form in version.forms
            ],
        )


@dataclass(frozen=True)
class LoanTypeDetailResponse:
    """A loan type with its resolved form catalog."""

    id: int
    tenant_id: int
    name: str
    code: str
    description: str
    min_amount: Decimal
    max_amount: Decimal
    version: CatalogVersionDTO

    @classmethod
    def from_entity(cls, loan_type, version) -> "LoanTypeDetailResponse":
        return cls(
            id=loan_type.id,
            tenant_id=loan_type.tenant_id,
            name=loan_type.name,
            code=loan_type.code,
            description=loan_type.description,
            min_amount=loan_type.min_amount,
            max_amount=loan_type.max_amount,
            version=CatalogVersionDTO.from_entity(version),
        )
