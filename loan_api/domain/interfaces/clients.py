"""External client interfaces."""

from abc import ABC, abstractmethod
from decimal import Decimal


class CreditBureauClient(ABC):
    """
    Abstract client for a credit bureau.

    Looks up the credit score of an applicant by identity document.
    """

    @abstractmethod
    async def get_credit_score(self, document_type: str, document_number: str) -> int:
        """
        Fetch the credit score for a document.

        Returns:
            A score in the 300-850 range
        """
        ...


class DisbursementClient(ABC):
    """
    Abstract client for the payment rail that transfers approved funds.
    """

    @abstractmethod
    async def disburse(self, user_id: int, amount: Decimal) -> bool:
        """
        Transfer ``amount`` to the borrower.

        Returns:
            True if the transfer was accepted. A False result is a final
            business outcome and must not be retried.
        """
        ...
