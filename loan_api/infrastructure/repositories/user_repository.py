"""PostgreSQL implementations of UserRepository and TenantRepository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from loan_api.domain.entities import DocumentType, Tenant, User
from loan_api.domain.exceptions import PersistenceException
from loan_api.domain.interfaces import TenantRepository, UserRepository
from loan_api.infrastructure.database.models import TenantModel, UserModel


class PostgresUserRepository(UserRepository):
    """PostgreSQL-backed user repository."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_by_id(self, user_id: int) -> Optional[User]:
        try:
            model = await self._session.get(UserModel, user_id)
        except SQLAlchemyError as e:
            raise PersistenceException("get user", str(e)) from e

        if model is None:
            return None

        return User(
            id=model.id,
            tenant_id=model.tenant_id,
            name=model.name,
            email=model.email,
            phone=model.phone,
            document_type=DocumentType(model.document_type),
            document_number=model.document_number,
            password_hash=model.password_hash,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )


class PostgresTenantRepository(TenantRepository):
    """PostgreSQL-backed tenant repository."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_by_id(self, tenant_id: int) -> Optional[Tenant]:
        return await self._get_one(TenantModel.id == tenant_id)

    async def get_by_code(self, code: str) -> Optional[Tenant]:
        return await self._get_one(TenantModel.code == code)

    async def _get_one(self, criterion) -> Optional[Tenant]:
        try:
            result = await self._session.execute(select(TenantModel).where(criterion))
            model = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise PersistenceException("get tenant", str(e)) from e

        if model is None:
            return None

        return Tenant(
            id=model.id,
            name=model.name,
            code=model.code,
            description=model.description,
            is_active=model.is_active,
            config=model.config or {},
        )
