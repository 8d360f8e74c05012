"""PostgreSQL implementation of LoanTypeRepository."""

from decimal import Decimal
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from loan_api.domain.entities import FormInput, LoanType, LoanTypeForm, LoanTypeVersion
from loan_api.domain.exceptions import PersistenceException
from loan_api.domain.interfaces import LoanTypeRepository
from loan_api.infrastructure.database.models import (
    LoanTypeFormInputModel,
    LoanTypeFormModel,
    LoanTypeModel,
    LoanTypeVersionModel,
)


class PostgresLoanTypeRepository(LoanTypeRepository):
    """
    PostgreSQL implementation of the loan catalog repository.

    The whole catalog tree is filtered while loading: only the active
    default version, and within it only active forms and inputs.
    Ordering comes from the relationships' ``order`` columns.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_by_id(self, loan_type_id: int) -> Optional[LoanType]:
        current_versions = LoanTypeModel.versions.and_(
            LoanTypeVersionModel.is_active.is_(True),
            LoanTypeVersionModel.is_default.is_(True),
        )
        active_forms = LoanTypeVersionModel.forms.and_(LoanTypeFormModel.is_active.is_(True))
        active_inputs = LoanTypeFormModel.inputs.and_(LoanTypeFormInputModel.is_active.is_(True))

        stmt = (
            select(LoanTypeModel)
            .options(
                selectinload(current_versions)
                .selectinload(active_forms)
                .selectinload(active_inputs)
            )
            .where(LoanTypeModel.id == loan_type_id, LoanTypeModel.is_active.is_(True))
            .execution_options(populate_existing=True)
        )

        try:
            result = await self._session.execute(stmt)
            model = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise PersistenceException("get loan type", str(e)) from e

        if model is None:
            return None

        return self._to_entity(model)

    def _to_entity(self, model: LoanTypeModel) -> LoanType:
        return LoanType(
            id=model.id,
            tenant_id=model.tenant_id,
            name=model.name,
            code=model.code,
            description=model.description,
            min_amount=Decimal(model.min_amount or 0),
            max_amount=Decimal(model.max_amount or 0),
            is_active=model.is_active,
            versions=[self._version_to_entity(version) for version in model.versions],
        )

    def _version_to_entity(self, model: LoanTypeVersionModel) -> LoanTypeVersion:
        return LoanTypeVersion(
            id=model.id,
            loan_type_id=model.loan_type_id,
            version=model.version,
            description=model.description,
            is_active=model.is_active,
            is_default=model.is_default,
            config=model.config,
            forms=[self._form_to_entity(form) for form in model.forms],
        )

    def _form_to_entity(self, model: LoanTypeFormModel) -> LoanTypeForm:
        return LoanTypeForm(
            id=model.id,
            code=model.code,
            label=model.label,
            description=model.description,
            order=model.order,
            is_required=model.is_required,
            is_active=model.is_active,
            config=model.config,
            inputs=[
                FormInput(
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
                for item in model.inputs
            ],
        )
