"""Loan product catalog: loan types and their versioned dynamic forms."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, List, Optional


@dataclass
class FormInput:
    """
    A single input of a form.

    ``validation_rules``, ``options`` and ``config`` are opaque JSON
    documents owned by the form designer; only ``code``, ``is_required``,
    ``is_active`` and ``order`` drive application logic.
    """

    code: str
    label: str = ""
    input_type: str = "text"
    placeholder: str = ""
    default_value: str = ""
    validation_rules: Any = None
    options: Any = None
    config: Any = None
    order: int = 0
    is_required: bool = False
    is_active: bool = True
    id: Optional[int] = None

    @property
    def is_mandatory(self) -> bool:
        return self.is_active and self.is_required


@dataclass
class LoanTypeForm:
    """A named section of an application (e.g. "Personal Information")."""

    code: str
    label: str = ""
    description: str = ""
    order: int = 0
    is_required: bool = False
    is_active: bool = True
    config: Any = None
    inputs: List[FormInput] = field(default_factory=list)
    id: Optional[int] = None

    @property
    def is_mandatory(self) -> bool:
        return self.is_active and self.is_required


@dataclass
class LoanTypeVersion:
    """A versioned ruleset of forms for a loan type."""

    version: str
    description: str = ""
    is_active: bool = True
    is_default: bool = False
    config: Any = None
    forms: List[LoanTypeForm] = field(default_factory=list)
    id: Optional[int] = None
    loan_type_id: Optional[int] = None

    @property
    def is_current(self) -> bool:
        """Only the active default version is used for applications."""
        return self.is_active and self.is_default

    def required_input_codes(self) -> List[str]:
        """Codes of every active, required input in an active, required form."""
        return [
            form_input.code
            for form in self.forms
            if form.is_mandatory
            for form_input in form.inputs
            if form_input.is_mandatory
        ]


@dataclass
class LoanType:
    """A loan product offered by a tenant."""

    tenant_id: int
    name: str
    code: str
    description: str = ""
    min_amount: Decimal = Decimal("0")
    max_amount: Decimal = Decimal("0")
    is_active: bool = True
    versions: List[LoanTypeVersion] = field(default_factory=list)
    id: Optional[int] = None

    @property
    def current_version(self) -> Optional[LoanTypeVersion]:
        for version in self.versions:
            if version.is_current:
                return version
        return None
