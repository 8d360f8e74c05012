"""Data transfer objects for loan application operations."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class CreateLoanRequest:
    """Input data for opening a loan application."""
    loan_type_id: int

    def validate(self) -> List[str]:
        errors = []

        if self.loan_type_id is None or self.loan_type_id <= 0:
            errors.append("loan_type_id must be a positive integer")

        return errors


@dataclass(frozen=True)
class LoanDataItem:
    """A single submitted answer."""
    form_id: int
    key: str
    value: str
    index: int = 0


@dataclass(frozen=True)
class SaveLoanDataRequest:
    """
    Input data for submitting the answers of an application.

    The submitted set replaces every previously stored answer.
    """
    loan_id: int
    data: Tuple[LoanDataItem, ...] = ()

    def validate(self) -> List[str]:
        errors = []

        if self.loan_id is None or self.loan_id <= 0:
            errors.append("loan_id must be a positive integer")

        seen = set()
        for position, item in enumerate(self.data):
            if not item.key or not item.key.strip():
                errors.append(f"data[{position}].key is required")
                continue

            if item.index < 0:
                errors.append(f"data[{position}].index must not be negative")

            if (item.key, item.index) in seen:
                errors.append(f"duplicate answer for key '{item.key}' at index {item.index}")
            seen.add((item.key, item.index))

        return errors


@dataclass(frozen=True)
class LoanDataDTO:
    id: Optional[int]
    form_id: int
    key: str
    value: str
    index: int


@dataclass(frozen=True)
class UserSummaryDTO:
    """Borrower details embedded in loan responses."""

    id: int
    name: str
    email: str
    phone: str
    document_type: str
    document_number: str

    @classmethod
    def from_entity(cls, user) -> "UserSummaryDTO":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            phone=user.phone,
            document_type=getattr(user.document_type, "value", user.document_type),
            document_number=user.document_number,
        )


@dataclass(frozen=True)
class LoanTypeSummaryDTO:
    """Loan product details embedded in loan responses."""

    id: int
    name: str
    code: str
    description: str
    min_amount: Decimal
    max_amount: Decimal

    @classmethod
    def from_entity(cls, loan_type) -> "LoanTypeSummaryDTO":
        return cls(
            id=loan_type.id,
            name=loan_type.name,
            code=loan_type.code,
            description=loan_type.description,
            min_amount=loan_type.min_amount,
            max_amount=loan_type.max_amount,
        )


@dataclass(frozen=True)
class LoanResponse:
    """Response data for a loan application."""

    id: int
    loan_type_id: int
    user_id: int
    status: str
    observation: str
    amount_approved: Decimal
    credit_score: Optional[int]
    identity_verified: Optional[bool]
    created_at: datetime
    updated_at: datetime
    data: List[LoanDataDTO]
    user: Optional[UserSummaryDTO] = None
    loan_type: Optional[LoanTypeSummaryDTO] = None

    @classmethod
    def from_entities(cls, loan, user=None, loan_type=None) -> "LoanResponse":
        return cls(
            id=loan.id,
            loan_type_id=loan.loan_type_id,
            user_id=loan.user_id,
            status=loan.status.value,
            observation=loan.observation,
            amount_approved=loan.amount_approved,
            credit_score=loan.credit_score,
            identity_verified=loan.identity_verified,
            created_at=loan.created_at,
            updated_at=loan.updated_at,
            data=[
                LoanDataDTO(
                    id=item.id,
                    form_id=item.form_id,
                    key=item.key,
                    value=item.value,
                    index=item.index,
                )
                for item in loan.data
            ],
            user=UserSummaryDTO.from_entity(user) if user else None,
            loan_type=LoanTypeSummaryDTO.from_entity(loan_type) if loan_type else None,
        )
