"""Loan application aggregate and its submitted form data."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import List, Optional


class LoanStatus(str, Enum):
    """Lifecycle states of a loan application."""

    PENDING = "pending"
    ON_PROGRESS = "on_progress"
    COMPLETED = "completed"
    APPROVED = "approved"
    REJECTED = "rejected"

    @property
    def is_terminal(self) -> bool:
        return self in (LoanStatus.APPROVED, LoanStatus.REJECTED)

    @property
    def accepts_data(self) -> bool:
        return self in (LoanStatus.PENDING, LoanStatus.ON_PROGRESS)


@dataclass
class LoanData:
    """
    A single submitted answer to a form input.

    Attributes:
        form_id: Form (section) the answer belongs to
        key: Code of the form input being answered
        value: Raw submitted value
        index: Position within a repeatable group; answers are unique
            by (key, index), not by key alone
    """

    form_id: int
    key: str
    value: str
    index: int = 0
    loan_id: Optional[int] = None
    id: Optional[int] = None


@dataclass
class Loan:
    """
    A loan application.

    ``credit_score`` and ``identity_verified`` stay ``None`` until a data
    submission computes them. Once set they are only ever overwritten.
    """

    loan_type_id: int
    user_id: int
    status: LoanStatus = LoanStatus.PENDING
    observation: str = ""
    amount_approved: Decimal = Decimal("0")
    credit_score: Optional[int] = None
    identity_verified: Optional[bool] = None
    data: List[LoanData] = field(default_factory=list)
    id: Optional[int] = None
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    @property
    def is_evaluated(self) -> bool:
        """True once both the credit score and identity check are known."""
        return self.credit_score is not None and self.identity_verified is not None

    def record_evaluation(
        self,
        credit_score: Optional[int] = None,
        identity_verified: Optional[bool] = None,
    ) -> None:
        """Store freshly computed evaluation results, keeping prior ones for missing values."""
        if credit_score is not None:
            self.credit_score = credit_score
        if identity_verified is not None:
            self.identity_verified = identity_verified

    def value_of(self, key: str) -> str:
        """Return the first stored value for ``key``, or an empty string."""
        for item in self.data:
            if item.key == key:
                return item.value
        return ""

    def decimal_value_of(self, key: str) -> Decimal:
        """Return the first stored value for ``key`` as a Decimal (0 if absent or invalid)."""
        raw = self.value_of(key).strip()
        if not raw:
            return Decimal("0")
        try:
            value = Decimal(raw)
        except InvalidOperation:
            return Decimal("0")
        return value if value.is_finite() else Decimal("0")
