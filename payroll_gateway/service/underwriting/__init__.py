"""
Underwriting Module for the Payroll Gateway loan engine
"""

from .settings import UnderwritingSettings, underwriting_settings
from .salary_bands import required_score
from .margin import credit_margin, exceeds_margin
from .installments import calculate_installment_options, round_half_up
from .decision import decide
from .schedule import build_installment_schedule, installment_value

__all__ = [
    # Settings
    "UnderwritingSettings",
    "underwriting_settings",
    # Salary Bands
    "required_score",
    # Margin
    "credit_margin",
    "exceeds_margin",
    # Simulation
    "calculate_installment_options",
    "round_half_up",
    # Decision
    "decide",
    # Schedule
    "build_installment_schedule",
    "installment_value",
]
