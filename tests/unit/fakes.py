"""
Test doubles for unit tests.

- A loan type catalog with 8 required inputs across 3 required forms
- In-memory repositories implementing the domain interfaces
- A deterministic random source for the credit score simulation
"""

import copy
from typing import Dict, List, Optional, Sequence

from loan_api.domain.entities import (
    FormInput,
    Loan,
    LoanData,
    LoanType,
    LoanTypeForm,
    LoanTypeVersion,
    User,
)
from loan_api.domain.interfaces import (
    LoanRepository,
    LoanTypeRepository,
    UserRepository,
)


# =============================================================================
# Random Source
# =============================================================================

class FixedRandom:
    """Random source that always returns the same variation."""

    def __init__(self, offset: int = 0):
        self.offset = offset
        self.calls = []

    def randint(self, a: int, b: int) -> int:
        self.calls.append((a, b))
        return self.offset


# =============================================================================
# Catalog
# =============================================================================

def build_catalog_version() -> LoanTypeVersion:
    """Active default version: 3 required forms holding 8 required inputs."""
    personal = LoanTypeForm(
        id=1,
        code="personal_info",
        label="Personal Information",
        order=1,
        is_required=True,
        inputs=[
            FormInput(id=1, code="full_name", order=1, is_required=True),
            FormInput(id=2, code="document_type", input_type="select", order=2, is_required=True),
            FormInput(id=3, code="document_number", order=3, is_required=True),
            FormInput(id=4, code="middle_name", order=4, is_required=False),
            FormInput(id=5, code="legacy_code", order=5, is_required=True, is_active=False),
        ],
    )
    contact = LoanTypeForm(
        id=2,
        code="contact_info",
        label="Contact Information",
        order=2,
        is_required=True,
        inputs=[
            FormInput(id=6, code="email", input_type="email", order=1, is_required=True),
            FormInput(id=7, code="phone", order=2, is_required=True),
        ],
    )
    financial = LoanTypeForm(
        id=3,
        code="financial_info",
        label="Financial Information",
        order=3,
        is_required=True,
        inputs=[
            FormInput(id=8, code="monthly_income", input_type="number", order=1, is_required=True),
            FormInput(id=9, code="requested_amount", input_type="number", order=2, is_required=True),
            FormInput(id=10, code="employment_status", order=3, is_required=True),
        ],
    )
    references = LoanTypeForm(
        id=4,
        code="references",
        label="References",
        order=4,
        is_required=False,
        inputs=[FormInput(id=11, code="reference_name", order=1, is_required=True)],
    )
    retired = LoanTypeForm(
        id=5,
        code="retired_form",
        order=5,
        is_required=True,
        is_active=False,
        inputs=[FormInput(id=12, code="retired_input", order=1, is_required=True)],
    )

    return LoanTypeVersion(
        id=1,
        loan_type_id=1,
        version="1.0",
        is_active=True,
        is_default=True,
        forms=[personal, contact, financial, references, retired],
    )


def application_data(
    full_name: str = "Juan Perez Gomez",
    document_type: str = "cedula",
    document_number: str = "1234567898",
    requested_amount: str = "2000000",
    monthly_income: str = "5000000",
) -> List[dict]:
    """A complete submission answering all 8 required inputs."""
    return [
        {"form_id": 1, "key": "full_name", "value": full_name, "index": 0},
        {"form_id": 1, "key": "document_type", "value": document_type, "index": 0},
        {"form_id": 1, "key": "document_number", "value": document_number, "index": 0},
        {"form_id": 2, "key": "email", "value": "juan@example.com", "index": 0},
        {"form_id": 2, "key": "phone", "value": "3001234567", "index": 0},
        {"form_id": 3, "key": "monthly_income", "value": monthly_income, "index": 0},
        {"form_id": 3, "key": "requested_amount", "value": requested_amount, "index": 0},
        {"form_id": 3, "key": "employment_status", "value": "employed", "index": 0},
    ]


# =============================================================================
# In-Memory Repositories
# =============================================================================

class InMemoryLoanRepository(LoanRepository):
    """Stores copies so callers cannot mutate persisted state by accident."""

    def __init__(self):
        self.loans: Dict[int, Loan] = {}
        self.locked: List[int] = []
        self._next_id = 1
        self._next_data_id = 1

    async def create(self, loan: Loan) -> Loan:
        loan.id = self._next_id
        self._next_id += 1
        self.loans[loan.id] = copy.deepcopy(loan)
        return loan

    async def get_by_id(self, loan_id: int, for_update: bool = False) -> Optional[Loan]:
        if for_update:
            self.locked.append(loan_id)
        loan = self.loans.get(loan_id)
        return copy.deepcopy(loan) if loan else None

    async def get_by_user_id(self, user_id: int) -> List[Loan]:
        loans = [loan for loan in self.loans.values() if loan.user_id == user_id]
        return [copy.deepcopy(loan) for loan in sorted(loans, key=lambda l: l.id, reverse=True)]

    async def replace_data(self, loan_id: int, data: Sequence[LoanData]) -> List[LoanData]:
        stored = []
        for item in data:
            item = copy.deepcopy(item)
            item.id = self._next_data_id
            item.loan_id = loan_id
            self._next_data_id += 1
            stored.append(item)
        self.loans[loan_id].data = copy.deepcopy(stored)
        return stored

    async def update(self, loan: Loan) -> Loan:
        stored = self.loans[loan.id]
        stored.status = loan.status
        stored.observation = loan.observation
        stored.amount_approved = loan.amount_approved
        stored.credit_score = loan.credit_score
        stored.identity_verified = loan.identity_verified
        return loan


class InMemoryLoanTypeRepository(LoanTypeRepository):
    def __init__(self, loan_types: Sequence[LoanType] = ()):
        self.loan_types = {loan_type.id: loan_type for loan_type in loan_types}

    async def get_by_id(self, loan_type_id: int) -> Optional[LoanType]:
        loan_type = self.loan_types.get(loan_type_id)
        if loan_type is None or not loan_type.is_active:
            return None
        return loan_type


class InMemoryUserRepository(UserRepository):
    def __init__(self, users: Sequence[User] = ()):
        self.users = {user.id: user for user in users}

    async def get_by_id(self, user_id: int) -> Optional[User]:
        return self.users.get(user_id)

