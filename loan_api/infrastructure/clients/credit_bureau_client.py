"""Simulated implementation of CreditBureauClient."""

from typing import Optional

import structlog

from loan_api.core.metrics import record_credit_score
from loan_api.domain.interfaces import CreditBureauClient
from loan_api.service.lending import (
    LendingSettings,
    RandomSource,
    lending_settings,
    simulate_credit_score,
)

logger = structlog.get_logger(__name__)


class SimulatedCreditBureauClient(CreditBureauClient):
    """
    Credit bureau stand-in.

    Scores are derived from the document number with a small random
    variation; no external service is called.
    """

    def __init__(
        self,
        rng: Optional[RandomSource] = None,
        settings: LendingSettings = lending_settings,
    ):
        self._rng = rng
        self._settings = settings

    async def get_credit_score(self, document_type: str, document_number: str) -> int:
        score = simulate_credit_score(
            document_type,
            document_number,
            rng=self._rng,
            settings=self._settings,
        )
        record_credit_score(score)

        logger.debug(
            "credit_score_simulated",
            document_type=document_type,
            credit_score=score,
        )
        return score
