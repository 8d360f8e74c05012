"""
Fixtures for unit tests.

Provides:
- The catalog version and loan types used across tests
- Borrowers whose document numbers select known score bands
- Factories for deterministic random sources and complete submissions
"""

from decimal import Decimal

import pytest

from loan_api.domain.entities import DocumentType, LoanType, LoanTypeVersion, User

from fakes import FixedRandom, application_data, build_catalog_version


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def catalog_version() -> LoanTypeVersion:
    return build_catalog_version()


@pytest.fixture
def personal_loan() -> LoanType:
    return LoanType(
        id=1,
        tenant_id=1,
        name="Personal Loan",
        code="personal",
        min_amount=Decimal("100000"),
        max_amount=Decimal("50000000"),
        versions=[
            build_catalog_version(),
        ],
    )


@pytest.fixture
def foreign_loan() -> LoanType:
    """A loan type owned by another tenant."""
    version = build_catalog_version()
    version.id = 2
    version.loan_type_id = 2
    return LoanType(
        id=2,
        tenant_id=2,
        name="Vehicle Loan",
        code="vehicle",
        versions=[version],
    )


@pytest.fixture
def borrower() -> User:
    return User(
        id=1,
        tenant_id=1,
        name="Juan Perez",
        email="juan@example.com",
        phone="3001234567",
        document_type=DocumentType.CEDULA,
        document_number="1234567898",
    )


@pytest.fixture
def borrower_ending_in_zero() -> User:
    return User(
        id=10,
        tenant_id=1,
        name="Maria Lopez",
        email="maria@example.com",
        phone="3007654321",
        document_type=DocumentType.CEDULA,
        document_number="9876543218",
    )


@pytest.fixture
def low_score_borrower() -> User:
    return User(
        id=3,
        tenant_id=1,
        name="Pedro Ramirez",
        email="pedro@example.com",
        phone="3005550000",
        document_type=DocumentType.CEDULA,
        document_number="5550000001",
    )


@pytest.fixture
def fixed_random():
    """Factory for deterministic random sources: ``fixed_random(offset)``."""
    return FixedRandom


@pytest.fixture
def submission():
    """Factory for complete submissions: ``submission(**overrides)``."""
    return application_data
