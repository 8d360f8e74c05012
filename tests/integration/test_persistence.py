"""
Integration tests for persistence.

These tests verify:
1. Loan repository create/get/update and full data replacement
2. Soft-deleted loans are invisible
3. Catalog loading keeps only the current version and active entries
4. A failed request rolls back everything it wrote
"""

from datetime import datetime
from decimal import Decimal

import pytest
from httpx import AsyncClient
from sqlalchemy import func, select, update

from loan_api.core.dependencies import get_identity_verifier
from loan_api.domain.entities import Loan, LoanData, LoanStatus
from loan_api.domain.exceptions import IdentityVerificationException, LoanNotFoundException
from loan_api.infrastructure.database import DatabaseSessionManager, LoanDataModel, LoanModel
from loan_api.infrastructure.repositories import (
    PostgresLoanRepository,
    PostgresLoanTypeRepository,
    PostgresTenantRepository,
    PostgresUserRepository,
)


def answers(loan_id: int, *pairs) -> list:
    return [
        LoanData(loan_id=loan_id, form_id=1, key=key, value=value)
        for key, value in pairs
    ]


async def create_loan(manager: DatabaseSessionManager, user_id: int = 1) -> int:
    async with manager.session() as session:
        loan = await PostgresLoanRepository(session).create(
            Loan(loan_type_id=1, user_id=user_id, observation="application created, awaiting data")
        )
    return loan.id


# =============================================================================
# Loan Repository Tests
# =============================================================================

class TestLoanRepository:
    """Tests for PostgresLoanRepository against a real database."""

    @pytest.mark.asyncio
    async def test_create_assigns_id(self, db_manager: DatabaseSessionManager):
        loan_id = await create_loan(db_manager)

        async with db_manager.session() as session:
            loan = await PostgresLoanRepository(session).get_by_id(loan_id)

        assert loan is not None
        assert loan.status == LoanStatus.PENDING
        assert loan.amount_approved == Decimal("0")
        assert loan.data == []

    @pytest.mark.asyncio
    async def test_replace_data_discards_previous_answers(
        self,
        db_manager: DatabaseSessionManager,
    ):
        loan_id = await create_loan(db_manager)

        async with db_manager.session() as session:
            repo = PostgresLoanRepository(session)
            await repo.replace_data(
                loan_id,
                answers(loan_id, ("full_name", "Juan Perez"), ("phone", "3001234567")),
            )

        async with db_manager.session() as session:
            repo = PostgresLoanRepository(session)
            stored = await repo.replace_data(loan_id, answers(loan_id, ("email", "juan@example.com")))

        assert [item.key for item in stored] == ["email"]
        assert stored[0].id is not None

        async with db_manager.session() as session:
            count = await session.scalar(
                select(func.count()).select_from(LoanDataModel).where(LoanDataModel.loan_id == loan_id)
            )
            loan = await PostgresLoanRepository(session).get_by_id(loan_id, for_update=True)

        assert count == 1
        assert [item.key for item in loan.data] == ["email"]

    @pytest.mark.asyncio
    async def test_replace_with_empty_set_clears_data(self, db_manager: DatabaseSessionManager):
        loan_id = await create_loan(db_manager)

        async with db_manager.session() as session:
            repo = PostgresLoanRepository(session)
            await repo.replace_data(loan_id, answers(loan_id, ("full_name", "Juan Perez")))
            await repo.replace_data(loan_id, [])

        async with db_manager.session() as session:
            loan = await PostgresLoanRepository(session).get_by_id(loan_id)

        assert loan.data == []

    @pytest.mark.asyncio
    async def test_update_persists_decision_fields(self, db_manager: DatabaseSessionManager):
        loan_id = await create_loan(db_manager)

        async with db_manager.session() as session:
            repo = PostgresLoanRepository(session)
            loan = await repo.get_by_id(loan_id, for_update=True)
            loan.status = LoanStatus.COMPLETED
            loan.observation = "application completed. Credit score: 720."
            loan.record_evaluation(credit_score=720, identity_verified=True)
            loan.amount_approved = Decimal("1500000.50")
            await repo.update(loan)

        async with db_manager.session() as session:
            loan = await PostgresLoanRepository(session).get_by_id(loan_id)

        assert loan.status == LoanStatus.COMPLETED
        assert loan.credit_score == 720
        assert loan.identity_verified is True
        assert loan.amount_approved == Decimal("1500000.50")

    @pytest.mark.asyncio
    async def test_user_loans_newest_first(self, db_manager: DatabaseSessionManager):
        first = await create_loan(db_manager)
        second = await create_loan(db_manager)
        await create_loan(db_manager, user_id=10)

        async with db_manager.session() as session:
            loans = await PostgresLoanRepository(session).get_by_user_id(1)

        assert [loan.id for loan in loans] == [second, first]

    @pytest.mark.asyncio
    async def test_soft_deleted_loan_is_invisible(self, db_manager: DatabaseSessionManager):
        loan_id = await create_loan(db_manager)

        async with db_manager.session() as session:
            await session.execute(
                update(LoanModel)
                .where(LoanModel.id == loan_id)
                .values(deleted_at=datetime.utcnow())
            )

        async with db_manager.session() as session:
            repo = PostgresLoanRepository(session)
            assert await repo.get_by_id(loan_id) is None
            assert await repo.get_by_user_id(1) == []

            with pytest.raises(LoanNotFoundException):
                await repo.update(Loan(id=loan_id, loan_type_id=1, user_id=1))


# =============================================================================
# Catalog and Identity Repository Tests
# =============================================================================

class TestCatalogRepository:
    """Tests for PostgresLoanTypeRepository filtering and ordering."""

    @pytest.mark.asyncio
    async def test_only_current_version_loaded(self, db_manager: DatabaseSessionManager):
        async with db_manager.session() as session:
            loan_type = await PostgresLoanTypeRepository(session).get_by_id(1)

        assert [version.version for version in loan_type.versions] == ["1.0"]

        version = loan_type.current_version
        assert [form.code for form in version.forms] == [
            "personal_info",
            "contact_info",
            "financial_info",
            "references",
        ]
        assert "legacy_code" not in [item.code for item in version.forms[0].inputs]
        assert version.required_input_codes() == [
            "full_name",
            "document_type",
            "document_number",
            "email",
            "phone",
            "monthly_income",
            "requested_amount",
            "employment_status",
        ]

    @pytest.mark.asyncio
    async def test_inactive_loan_type_not_loaded(self, db_manager: DatabaseSessionManager):
        async with db_manager.session() as session:
            assert await PostgresLoanTypeRepository(session).get_by_id(4) is None

    @pytest.mark.asyncio
    async def test_inactive_version_not_loaded(self, db_manager: DatabaseSessionManager):
        async with db_manager.session() as session:
            loan_type = await PostgresLoanTypeRepository(session).get_by_id(3)

        assert loan_type is not None
        assert loan_type.versions == []

    @pytest.mark.asyncio
    async def test_tenant_lookup_by_code_and_id(self, db_manager: DatabaseSessionManager):
        async with db_manager.session() as session:
            repo = PostgresTenantRepository(session)
            by_code = await repo.get_by_code("acme")
            by_id = await repo.get_by_id(1)
            missing = await repo.get_by_code("initech")

        assert by_code.id == by_id.id == 1
        assert missing is None

    @pytest.mark.asyncio
    async def test_user_lookup(self, db_manager: DatabaseSessionManager):
        async with db_manager.session() as session:
            user = await PostgresUserRepository(session).get_by_id(1)

        assert user.tenant_id == 1
        assert user.document_number == "1234567898"


# =============================================================================
# Transaction Tests
# =============================================================================

class FailingIdentityVerifier:
    """Identity verifier whose user lookup always fails."""

    async def verify_identity(self, user_id, document_type, document_number, full_name) -> bool:
        raise IdentityVerificationException("registered user data could not be loaded")


class TestRequestTransaction:
    """A failed request must leave no partial writes behind."""

    @pytest.mark.asyncio
    async def test_failed_save_rolls_back_data_replacement(
        self,
        app,
        client: AsyncClient,
        auth_headers,
        create_loan,
        submission,
    ):
        loan_id = await create_loan()
        await client.post(
            "/v1/loans/data",
            json={"loan_id": loan_id, "data": submission()[3:5]},
            headers=auth_headers(),
        )

        app.dependency_overrides[get_identity_verifier] = lambda: FailingIdentityVerifier()

        response = await client.post(
            "/v1/loans/data",
            json={"loan_id": loan_id, "data": submission()},
            headers=auth_headers(),
        )

        assert response.status_code == 500
        assert response.json()["error"]["code"] == "IDENTITY_VERIFICATION_ERROR"

        del app.dependency_overrides[get_identity_verifier]

        response = await client.get(f"/v1/loans/{loan_id}", headers=auth_headers())

        loan = response.json()["data"]
        assert loan["status"] == "on_progress"
        assert loan["credit_score"] is None
        assert [item["key"] for item in loan["data"]] == ["email", "phone"]
