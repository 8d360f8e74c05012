"""PostgreSQL implementation of LoanRepository."""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional, Sequence

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from loan_api.domain.entities import Loan, LoanData, LoanStatus
from loan_api.domain.exceptions import LoanNotFoundException, PersistenceException
from loan_api.domain.interfaces import LoanRepository
from loan_api.infrastructure.database.models import LoanDataModel, LoanModel


class PostgresLoanRepository(LoanRepository):
    """
    PostgreSQL implementation of the Loan repository.

    Uses SQLAlchemy async session for database operations. Soft-deleted
    loans are invisible to every query.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def create(self, loan: Loan) -> Loan:
        """Persist a new loan."""
        model = LoanModel(
            loan_type_id=loan.loan_type_id,
            user_id=loan.user_id,
            status=loan.status.value,
            observation=loan.observation,
            amount_approved=loan.amount_approved,
            credit_score=loan.credit_score,
            identity_verified=loan.identity_verified,
            created_at=loan.created_at,
            updated_at=loan.updated_at,
        )

        try:
            self._session.add(model)
            await self._session.flush()
        except SQLAlchemyError as e:
            raise PersistenceException("create loan", str(e)) from e

        loan.id = model.id
        return loan

    async def get_by_id(self, loan_id: int, for_update: bool = False) -> Optional[Loan]:
        """Retrieve a loan with its data, optionally locking the row."""
        stmt = (
            select(LoanModel)
            .options(selectinload(LoanModel.data))
            .where(LoanModel.id == loan_id, LoanModel.deleted_at.is_(None))
            .execution_options(populate_existing=True)
        )
        if for_update:
            stmt = stmt.with_for_update()

        try:
            result = await self._session.execute(stmt)
            model = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise PersistenceException("get loan", str(e)) from e

        if model is None:
            return None

        return self._to_entity(model)

    async def get_by_user_id(self, user_id: int) -> List[Loan]:
        """Retrieve every loan of a user, newest first."""
        stmt = (
            select(LoanModel)
            .options(selectinload(LoanModel.data))
            .where(LoanModel.user_id == user_id, LoanModel.deleted_at.is_(None))
            .order_by(LoanModel.created_at.desc(), LoanModel.id.desc())
        )

        try:
            result = await self._session.execute(stmt)
            models = result.scalars().all()
        except SQLAlchemyError as e:
            raise PersistenceException("list user loans", str(e)) from e

        return [self._to_entity(model) for model in models]

    async def replace_data(self, loan_id: int, data: Sequence[LoanData]) -> List[LoanData]:
        """Delete all stored data of the loan and insert the new set."""
        models = [
            LoanDataModel(
                loan_id=loan_id,
                form_id=item.form_id,
                key=item.key,
                value=item.value,
                index=item.index,
            )
            for item in data
        ]

        try:
            await self._session.execute(
                delete(LoanDataModel).where(LoanDataModel.loan_id == loan_id)
            )
            self._session.add_all(models)
            await self._session.flush()
        except SQLAlchemyError as e:
            raise PersistenceException("replace loan data", str(e)) from e

        return [self._data_to_entity(model) for model in models]

    async def update(self, loan: Loan) -> Loan:
        """Persist the mutable fields of a loan."""
        try:
            model = await self._session.get(LoanModel, loan.id)
        except SQLAlchemyError as e:
            raise PersistenceException("update loan", str(e)) from e

        if model is None or model.deleted_at is not None:
            raise LoanNotFoundException(loan.id)

        model.status = loan.status.value
        model.observation = loan.observation
        model.amount_approved = loan.amount_approved
        model.credit_score = loan.credit_score
        model.identity_verified = loan.identity_verified
        model.updated_at = datetime.utcnow()

        try:
            await self._session.flush()
        except SQLAlchemyError as e:
            raise PersistenceException("update loan", str(e)) from e

        loan.updated_at = model.updated_at
        return loan

    def _data_to_entity(self, model: LoanDataModel) -> LoanData:
        return LoanData(
            id=model.id,
            loan_id=model.loan_id,
            form_id=model.form_id,
            key=model.key,
            value=model.value,
            index=model.index,
        )

    def _to_entity(self, model: LoanModel) -> Loan:
        """Convert database model to domain entity."""
        return Loan(
            id=model.id,
            loan_type_id=model.loan_type_id,
            user_id=model.user_id,
            status=LoanStatus(model.status),
            observation=model.observation,
            amount_approved=Decimal(model.amount_approved or 0),
            credit_score=model.credit_score,
            identity_verified=model.identity_verified,
            data=[self._data_to_entity(item) for item in model.data],
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
