"""
Underwriting Settings for the Payroll Gateway loan engine.

This module contains the configurable parameters of the underwriting rules.
They can be adjusted via environment variables without a code change.

Environment variables use the UNDERWRITING_ prefix:
    UNDERWRITING_MARGIN_RATE=0.35
    UNDERWRITING_SALARY_BANDS_JSON=[[2000,400],[4000,500]]
    UNDERWRITING_DEFAULT_SCORE=400

Usage:
    from payroll_gateway.service.underwriting.settings import underwriting_settings

    # Use default settings (loaded from env)
    rate = underwriting_settings.margin_rate

    # Or create custom settings for testing
    custom = UnderwritingSettings(margin_rate=Decimal("0.30"))
"""

import json
from decimal import Decimal
from functools import lru_cache
from typing import List, Tuple

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class UnderwritingSettings(BaseSettings):
    """
    Configurable parameters for loan underwriting.

    All settings can be overridden via environment variables with UNDERWRITING_ prefix.
    Monetary values are in BRL.
    """

    model_config = SettingsConfigDict(
        env_prefix="UNDERWRITING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Credit Margin ===
    margin_rate: Decimal = Field(
        default=Decimal("0.35"),
        gt=0,
        le=1,
        description="Share of the salary that may be committed to a loan",
    )

    # === Loan Limits ===
    min_amount: Decimal = Field(
        default=Decimal("100"),
        gt=0,
        description="Smallest principal that may be requested",
    )
    max_installments: int = Field(
        default=4,
        ge=1,
        description="Largest number of monthly installments offered",
    )

    # === Salary Bands ===
    salary_bands_json: str = Field(
        default="[[2000,400],[4000,500],[8000,600],[12000,700]]",
        description="Salary bands as JSON array: [[upper_salary_bound, min_score], ...]",
    )
    top_band_score: int = Field(
        default=700,
        ge=0,
        description="Minimum score for salaries above every band",
    )

    # === Score Fallback ===
    default_score: int = Field(
        default=400,
        ge=0,
        description="Score used when the provider fails and the applicant cannot be re-read",
    )

    @field_validator("salary_bands_json")
    @classmethod
    def validate_bands_json(cls, v: str) -> str:
        """Validate that the bands are well-formed and ascending on both columns."""
        try:
            bands = json.loads(v)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON: {e}")

        if not isinstance(bands, list) or not bands:
            raise ValueError("Salary bands must be a non-empty list")

        previous = None
        for band in bands:
            if not isinstance(band, list) or len(band) != 2:
                raise ValueError("Each band must be [upper_salary_bound, min_score]")
            upper, score = band
            if not isinstance(score, int):
                raise ValueError("Band scores must be integers")
            if previous is not None and (upper <= previous[0] or score < previous[1]):
                raise ValueError("Salary bands must be ascending")
            previous = (upper, score)
        return v

    @property
    def salary_bands(self) -> List[Tuple[Decimal, int]]:
        """Salary bands as (upper_salary_bound, min_score), ascending."""
        bands = json.loads(self.salary_bands_json)
        return [(Decimal(str(upper)), score) for upper, score in bands]


@lru_cache
def get_underwriting_settings() -> UnderwritingSettings:
    """Get cached underwriting settings instance."""
    return UnderwritingSettings()


underwriting_settings = get_underwriting_settings()
