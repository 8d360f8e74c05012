"""
Lending Settings for the loan decision engine.

This module contains the configurable parameters of the credit score
simulation, the approval rules and the disbursement simulation.

Environment variables use the LENDING_ prefix:
    LENDING_MIN_CREDIT_SCORE=400
    LENDING_MIN_REQUESTED_AMOUNT=100000
    LENDING_DISBURSEMENT_FAILURE_DIGIT=

Usage:
    from loan_api.service.lending.settings import lending_settings

    # Use default settings (loaded from env)
    floor = lending_settings.min_credit_score

    # Or create custom settings for testing
    custom = LendingSettings(min_credit_score=450)
"""

from decimal import Decimal
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LendingSettings(BaseSettings):
    """
    Configurable parameters for the lending rules.

    All monetary values are in the tenant's currency units.
    Scores follow the 300-850 bureau scale.
    """

    model_config = SettingsConfigDict(
        env_prefix="LENDING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Credit Score Simulation ===
    score_floor: int = Field(
        default=300,
        description="Lowest score the bureau can report",
    )
    score_ceiling: int = Field(
        default=850,
        description="Highest score the bureau can report",
    )
    score_jitter: int = Field(
        default=25,
        ge=0,
        le=100,
        description="Maximum random variation added to the simulated score (+/-)",
    )

    # === Approval Rules ===
    min_credit_score: int = Field(
        default=400,
        description="Applications scoring below this are rejected",
    )
    repayment_capacity_ratio: Decimal = Field(
        default=Decimal("0.5"),
        gt=0,
        le=1,
        description="Share of monthly income a borrower can be lent",
    )
    capacity_override_score: int = Field(
        default=650,
        description="Score at or above which requests over capacity are still accepted",
    )
    min_requested_amount: Decimal = Field(
        default=Decimal("100000"),
        ge=0,
        description="Smallest amount that can be approved",
    )

    # === Score Bands (cosmetic, used in the approval reason) ===
    excellent_score: int = Field(default=700, description="Lower bound of the excellent band")
    good_score: int = Field(default=600, description="Lower bound of the good band")
    acceptable_score: int = Field(default=500, description="Lower bound of the acceptable band")

    # === Disbursement Simulation ===
    max_daily_disbursement: Decimal = Field(
        default=Decimal("50000000"),
        gt=0,
        description="Largest amount the payment rail transfers in one day",
    )
    disbursement_failure_digit: Optional[str] = Field(
        default="0",
        description=(
            "User ids ending in this digit get a failed disbursement. "
            "Deterministic hook for exercising the failure path; empty disables it"
        ),
    )

    @field_validator("disbursement_failure_digit", mode="before")
    @classmethod
    def validate_failure_digit(cls, v):
        """Normalise the failure hook to a single digit or None."""
        if v is None:
            return None
        v = str(v).strip()
        if not v:
            return None
        if len(v) != 1 or not v.isdigit():
            raise ValueError("disbursement_failure_digit must be a single digit")
        return v

    @model_validator(mode="after")
    def validate_score_range(self) -> "LendingSettings":
        """Ensure the score scale and bands are consistent."""
        if self.score_floor >= self.score_ceiling:
            raise ValueError(
                f"score_floor ({self.score_floor}) must be below score_ceiling ({self.score_ceiling})"
            )
        if not self.acceptable_score <= self.good_score <= self.excellent_score:
            raise ValueError("score bands must be ordered acceptable <= good <= excellent")
        return self


@lru_cache
def get_lending_settings() -> LendingSettings:
    """Get cached lending settings instance."""
    return LendingSettings()


lending_settings = get_lending_settings()
