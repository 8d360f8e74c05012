"""External client implementations."""

from .credit_bureau_client import SimulatedCreditBureauClient
from .disbursement_client import SimulatedDisbursementClient

__all__ = [
    "SimulatedCreditBureauClient",
    "SimulatedDisbursementClient",
]
