"""
Disbursement simulation.

Stands in for the payment rail that transfers approved funds to the
borrower. A failed disbursement is a business outcome and is never retried.
"""

from decimal import Decimal

from .settings import LendingSettings, lending_settings


DISBURSEMENT_FAILED_OBSERVATION = "approved but disbursement failed, contact support"
DISBURSEMENT_SUCCEEDED_SUFFIX = " - disbursement completed successfully"


def simulate_disbursement(
    user_id: int,
    amount: Decimal,
    settings: LendingSettings = lending_settings,
) -> bool:
    """
    Simulate transferring ``amount`` to the borrower.

    Fails when:
    - the amount is zero or negative
    - the user id ends in the configured failure digit
    - the amount exceeds the daily disbursement limit

    Returns:
        True if the transfer succeeded
    """
    if amount <= 0:
        return False

    failure_digit = settings.disbursement_failure_digit
    if failure_digit is not None and str(user_id)[-1] == failure_digit:
        return False

    if amount > settings.max_daily_disbursement:
        return False

    return True
