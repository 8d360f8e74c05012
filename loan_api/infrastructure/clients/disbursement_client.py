"""Simulated implementation of DisbursementClient."""

from decimal import Decimal

import structlog

from loan_api.core.metrics import record_disbursement
from loan_api.domain.interfaces import DisbursementClient
from loan_api.service.lending import LendingSettings, lending_settings, simulate_disbursement

logger = structlog.get_logger(__name__)


class SimulatedDisbursementClient(DisbursementClient):
    """
    Payment rail stand-in.

    A failed transfer is reported once and never retried.
    """

    def __init__(self, settings: LendingSettings = lending_settings):
        self._settings = settings

    async def disburse(self, user_id: int, amount: Decimal) -> bool:
        success = simulate_disbursement(user_id, amount, settings=self._settings)
        record_disbursement(success)

        if success:
            logger.info("disbursement_completed", user_id=user_id, amount=str(amount))
        else:
            logger.warning("disbursement_failed", user_id=user_id, amount=str(amount))

        return success
