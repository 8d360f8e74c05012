"""Repository interfaces for data persistence."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from loan_api.domain.entities import Loan, LoanData, LoanType, Tenant, User


class LoanRepository(ABC):
    """
    Abstract repository for Loan persistence.

    Implementations may use PostgreSQL, in-memory storage, etc.
    All calls made while handling one request share one transaction.
    """

    @abstractmethod
    async def create(self, loan: Loan) -> Loan:
        """
        Persist a new loan.

        Returns:
            The saved loan with its generated id populated
        """
        ...

    @abstractmethod
    async def get_by_id(self, loan_id: int, for_update: bool = False) -> Optional[Loan]:
        """
        Retrieve a loan with its data by ID.

        Args:
            loan_id: The loan's identifier
            for_update: Lock the loan row until the transaction ends

        Returns:
            The loan if found, None otherwise
        """
        ...

    @abstractmethod
    async def get_by_user_id(self, user_id: int) -> List[Loan]:
        """
        Retrieve every loan of a user, newest first.
        """
        ...

    @abstractmethod
    async def replace_data(self, loan_id: int, data: Sequence[LoanData]) -> List[LoanData]:
        """
        Delete all stored data of a loan and insert ``data`` in its place.

        Returns:
            The stored data with generated ids populated
        """
        ...

    @abstractmethod
    async def update(self, loan: Loan) -> Loan:
        """
        Persist status, observation, approved amount and evaluation fields.
        """
        ...


class LoanTypeRepository(ABC):
    """Abstract repository for the loan product catalog."""

    @abstractmethod
    async def get_by_id(self, loan_type_id: int) -> Optional[LoanType]:
        """
        Retrieve an active loan type by ID.

        Only versions that are both active and default are loaded, and
        only active forms and inputs within them, ordered by ``order``.

        Returns:
            The loan type if found and active, None otherwise
        """
        ...


class UserRepository(ABC):
    """Abstract repository for registered users."""

    @abstractmethod
    async def get_by_id(self, user_id: int) -> Optional[User]:
        """Retrieve a user by ID."""
        ...


class TenantRepository(ABC):
    """Abstract repository for tenants."""

    @abstractmethod
    async def get_by_id(self, tenant_id: int) -> Optional[Tenant]:
        """Retrieve a tenant by ID."""
        ...

    @abstractmethod
    async def get_by_code(self, code: str) -> Optional[Tenant]:
        """Retrieve a tenant by its unique code."""
        ...
