"""
Credit score simulation.

Stands in for a credit bureau lookup. The score is derived from the last
digit of the document number so that the same applicant always lands in
the same band, plus a small random variation.

Digit to base score:
    0, 1    -> 300, 350
    2, 3, 4 -> 400, 450, 500
    5, 6, 7 -> 550, 600, 650
    8, 9    -> 700, 750
"""

import random
from typing import Optional, Protocol

from .settings import LendingSettings, lending_settings


class RandomSource(Protocol):
    """The subset of ``random.Random`` the simulation depends on."""

    def randint(self, a: int, b: int) -> int:
        ...


BASE_SCORE = 300

_default_rng = random.Random()


def base_score_for_document(document_number: str) -> int:
    """
    Map a document number to its deterministic base score.

    Document numbers that are empty or do not end in a decimal digit get
    the base score of 300.
    """
    if not document_number:
        return BASE_SCORE

    last = document_number[-1]
    if not ("0" <= last <= "9"):
        return BASE_SCORE

    digit = int(last)
    if digit <= 1:
        return 300 + digit * 50
    elif digit <= 4:
        return 400 + (digit - 2) * 50
    elif digit <= 7:
        return 550 + (digit - 5) * 50
    else:
        return 700 + (digit - 8) * 50


def clamp_score(score: int, settings: LendingSettings = lending_settings) -> int:
    """Clamp a score to the bureau scale."""
    return max(settings.score_floor, min(settings.score_ceiling, score))


def simulate_credit_score(
    document_type: str,
    document_number: str,
    rng: Optional[RandomSource] = None,
    settings: LendingSettings = lending_settings,
) -> int:
    """
    Simulate a bureau credit score for an identity document.

    Args:
        document_type: Type of the identity document (not used by the
            simulation, kept for parity with a real bureau call)
        document_number: The identity document number
        rng: Random source for the variation; defaults to a process-wide
            ``random.Random`` instance
        settings: Lending settings (uses defaults if not provided)

    Returns:
        Score within [score_floor, score_ceiling]
    """
    rng = rng or _default_rng
    score = base_score_for_document(document_number)
    score += rng.randint(-settings.score_jitter, settings.score_jitter)
    return clamp_score(score, settings)
