"""
Lending rules for the loan decision engine.
"""

from .settings import LendingSettings, lending_settings, get_lending_settings
from .completeness import index_answers, missing_required_inputs, is_complete
from .credit_score import (
    RandomSource,
    base_score_for_document,
    clamp_score,
    simulate_credit_score,
)
from .identity import match_identity
from .status import (
    ALLOWED_TRANSITIONS,
    can_transition,
    can_accept_data,
    determine_status,
    describe_status,
)
from .approval import (
    ApprovalOutcome,
    repayment_capacity,
    evaluate_application,
    calculate_approved_amount,
)
from .disbursement import (
    DISBURSEMENT_FAILED_OBSERVATION,
    DISBURSEMENT_SUCCEEDED_SUFFIX,
    simulate_disbursement,
)

__all__ = [
    # Settings
    "LendingSettings",
    "lending_settings",
    "get_lending_settings",
    # Completeness
    "index_answers",
    "missing_required_inputs",
    "is_complete",
    # Credit Score
    "RandomSource",
    "base_score_for_document",
    "clamp_score",
    "simulate_credit_score",
    # Identity
    "match_identity",
    # Status
    "ALLOWED_TRANSITIONS",
    "can_transition",
    "can_accept_data",
    "determine_status",
    "describe_status",
    # Approval
    "ApprovalOutcome",
    "repayment_capacity",
    "evaluate_application",
    "calculate_approved_amount",
    # Disbursement
    "DISBURSEMENT_FAILED_OBSERVATION",
    "DISBURSEMENT_SUCCEEDED_SUFFIX",
    "simulate_disbursement",
]
