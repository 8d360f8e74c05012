"""Registered borrower entity."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional


class DocumentType(str, Enum):
    """Accepted identity document types."""

    CEDULA = "cedula"
    PASAPORTE = "pasaporte"
    TARJETA_IDENTIDAD = "tarjeta_identidad"


@dataclass
class User:
    """A tenant-scoped borrower identity."""

    tenant_id: int
    name: str
    email: str
    phone: str
    document_type: DocumentType
    document_number: str
    password_hash: str = field(default="", repr=False)
    id: Optional[int] = None
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)
