"""
Fixtures for integration tests.

Provides:
- In-memory database with seeded tenants, users and loan catalog
- Test client for the FastAPI app
- Deterministic credit bureau
- Bearer tokens and tenant headers for seeded users
"""

from datetime import datetime, timedelta
from decimal import Decimal
from typing import AsyncGenerator, Callable, Dict, List

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from jose import jwt

from loan_api.core.config import Settings, get_settings
from loan_api.core.dependencies import get_credit_bureau_client
from loan_api.infrastructure.clients import SimulatedCreditBureauClient
from loan_api.infrastructure.database import (
    DatabaseSessionManager,
    LoanTypeFormInputModel,
    LoanTypeFormModel,
    LoanTypeModel,
    LoanTypeVersionModel,
    TenantModel,
    UserModel,
)
from loan_api.main import create_app


JWT_SECRET = "test-secret"


# =============================================================================
# Test Doubles
# =============================================================================

class FixedRandom:
    """Random source that always returns the same score variation."""

    def __init__(self, offset: int = 0):
        self.offset = offset

    def randint(self, a: int, b: int) -> int:
        return self.offset


# =============================================================================
# Seed Data
# =============================================================================

def form_input(code: str, order: int, is_required: bool = True, **kwargs) -> LoanTypeFormInputModel:
    return LoanTypeFormInputModel(
        code=code,
        label=code.replace("_", " ").title(),
        order=order,
        is_required=is_required,
        **kwargs,
    )


def current_version_forms() -> List[LoanTypeFormModel]:
    """Three required forms with 8 required inputs, plus entries that must be ignored.

    Forms are created out of display order to exercise ordering.
    """
    financial = LoanTypeFormModel(
        code="financial_info",
        label="Financial Information",
        order=3,
        is_required=True,
        inputs=[
            form_input("employment_status", 3),
            form_input("monthly_income", 1, input_type="number"),
            form_input("requested_amount", 2, input_type="number"),
        ],
    )
    personal = LoanTypeFormModel(
        code="personal_info",
        label="Personal Information",
        order=1,
        is_required=True,
        inputs=[
            form_input("full_name", 1),
            form_input("document_type", 2, input_type="select", options=["cedula", "pasaporte"]),
            form_input("document_number", 3),
            form_input("middle_name", 4, is_required=False),
            form_input("legacy_code", 5, is_active=False),
        ],
    )
    contact = LoanTypeFormModel(
        code="contact_info",
        label="Contact Information",
        order=2,
        is_required=True,
        inputs=[
            form_input("email", 1, input_type="email"),
            form_input("phone", 2),
        ],
    )
    references = LoanTypeFormModel(
        code="references",
        label="References",
        order=4,
        is_required=False,
        inputs=[form_input("reference_name", 1)],
    )
    retired = LoanTypeFormModel(
        code="retired_form",
        label="Retired",
        order=5,
        is_required=True,
        is_active=False,
        inputs=[form_input("retired_input", 1)],
    )
    return [financial, personal, contact, references, retired]


async def seed_database(manager: DatabaseSessionManager) -> None:
    async with manager.session() as session:
        session.add_all(
            [
                TenantModel(id=1, name="Acme Lending", code="acme"),
                TenantModel(id=2, name="Globex Credit", code="globex"),
                TenantModel(id=3, name="Dormant Bank", code="dormant", is_active=False),
            ]
        )
        await session.flush()

        session.add_all(
            [
                UserModel(
                    id=1,
                    tenant_id=1,
                    name="Juan Perez",
                    email="juan@example.com",
                    phone="3001234567",
                    document_type="cedula",
                    document_number="1234567898",
                ),
                UserModel(
                    id=3,
                    tenant_id=1,
                    name="Pedro Ramirez",
                    email="pedro@example.com",
                    phone="3005550000",
                    document_type="cedula",
                    document_number="5550000001",
                ),
                UserModel(
                    id=10,
                    tenant_id=1,
                    name="Maria Lopez",
                    email="maria@example.com",
                    phone="3007654321",
                    document_type="cedula",
                    document_number="9876543218",
                ),
                UserModel(
                    id=20,
                    tenant_id=2,
                    name="Ana Torres",
                    email="ana@example.com",
                    phone="3009998877",
                    document_type="pasaporte",
                    document_number="AB1234567",
                ),
            ]
        )

        session.add_all(
            [
                LoanTypeModel(
                    id=1,
                    tenant_id=1,
                    name="Personal Loan",
                    code="personal",
                    description="Unsecured personal loan",
                    min_amount=Decimal("100000"),
                    max_amount=Decimal("50000000"),
                    versions=[
                        LoanTypeVersionModel(
                            version="0.9",
                            is_active=True,
                            is_default=False,
                            forms=[
                                LoanTypeFormModel(
                                    code="old_form",
                                    order=1,
                                    is_required=True,
                                    inputs=[form_input("old_input", 1)],
                                )
                            ],
                        ),
                        LoanTypeVersionModel(
                            version="1.0",
                            is_active=True,
                            is_default=True,
                            config={"currency": "COP"},
                            forms=current_version_forms(),
                        ),
                    ],
                ),
                LoanTypeModel(
                    id=2,
                    tenant_id=2,
                    name="Vehicle Loan",
                    code="vehicle",
                    versions=[
                        LoanTypeVersionModel(
                            version="1.0",
                            is_active=True,
                            is_default=True,
                            forms=current_version_forms(),
                        )
                    ],
                ),
                LoanTypeModel(
                    id=3,
                    tenant_id=1,
                    name="Draft Loan",
                    code="draft",
                    versions=[
                        LoanTypeVersionModel(
                            version="1.0",
                            is_active=False,
                            is_default=True,
                            forms=current_version_forms(),
                        )
                    ],
                ),
                LoanTypeModel(
                    id=4,
                    tenant_id=1,
                    name="Discontinued Loan",
                    code="discontinued",
                    is_active=False,
                ),
            ]
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


def encode_token(user_id: int, secret: str = JWT_SECRET, expires_in: int = 3600) -> str:
    claims = {
        "user_id": user_id,
        "exp": datetime.utcnow() + timedelta(seconds=expires_in),
    }
    return jwt.encode(claims, secret, algorithm="HS256")


# =============================================================================
# Database Fixtures
# =============================================================================

@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        database_url="sqlite+aiosqlite:///:memory:",
        jwt_secret_key=JWT_SECRET,
        jwt_algorithm="HS256",
        metrics_enabled=True,
        log_format="console",
    )


@pytest_asyncio.fixture
async def db_manager(test_settings: Settings) -> AsyncGenerator[DatabaseSessionManager, None]:
    """Create an in-memory SQLite database with seeded data."""
    manager = DatabaseSessionManager(test_settings)
    manager.init()
    await manager.create_tables()
    await seed_database(manager)

    yield manager

    await manager.close()


# =============================================================================
# App Client Fixtures
# =============================================================================

@pytest.fixture
def credit_bureau() -> SimulatedCreditBureauClient:
    """Bureau whose scores are the band base plus 20."""
    return SimulatedCreditBureauClient(rng=FixedRandom(20))


@pytest.fixture
def app(test_settings: Settings, db_manager: DatabaseSessionManager, credit_bureau):
    """
    Create the app wired to the test database.

    The lifespan handler does not run under ASGITransport, so the
    session manager is attached to app.state directly.
    """
    application = create_app(test_settings)
    application.state.db_manager = db_manager

    application.dependency_overrides[get_settings] = lambda: test_settings
    application.dependency_overrides[get_credit_bureau_client] = lambda: credit_bureau

    yield application

    application.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


# =============================================================================
# Helper Fixtures
# =============================================================================

@pytest.fixture
def make_token() -> Callable[..., str]:
    """Factory for signed bearer tokens: ``make_token(user_id, secret=..., expires_in=...)``."""
    return encode_token


@pytest.fixture
def auth_headers() -> Callable[..., Dict[str, str]]:
    """Factory for request headers: ``auth_headers(user_id=1, tenant="acme")``."""

    def build(user_id: int = 1, tenant: str = "acme") -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {encode_token(user_id)}",
            "X-Tenant-ID": tenant,
        }

    return build


@pytest.fixture
def submission() -> Callable[..., List[dict]]:
    """Factory for complete submissions: ``submission(**overrides)``."""
    return application_data


@pytest.fixture
def create_loan(client: AsyncClient, auth_headers):
    """Create a loan through the API and return its id."""

    async def create(user_id: int = 1, loan_type_id: int = 1) -> int:
        response = await client.post(
            "/v1/loans",
            json={"loan_type_id": loan_type_id},
            headers=auth_headers(user_id),
        )
        assert response.status_code == 201, response.text
        return response.json()["data"]["id"]

    return create


@pytest.fixture
def completed_loan(client: AsyncClient, auth_headers, create_loan, submission):
    """Create a loan and submit a complete application for it."""

    async def complete(user_id: int = 1, **overrides) -> int:
        loan_id = await create_loan(user_id)
        response = await client.post(
            "/v1/loans/data",
            json={"loan_id": loan_id, "data": submission(**overrides)},
            headers=auth_headers(user_id),
        )
        assert response.status_code == 200, response.text
        assert response.json()["data"]["status"] == "completed"
        return loan_id

    return complete
