"""Tenant entity: the isolation boundary for products and users."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class Tenant:
    """A client organization owning its own loan products and users."""

    name: str
    code: str
    description: str = ""
    is_active: bool = True
    config: Dict[str, Any] = field(default_factory=dict)
    id: Optional[int] = None
