"""
Salary-Band Scoring for the Payroll Gateway loan engine.

Maps a monthly salary to the minimum credit score an applicant must reach
to be approved. The same value doubles as the fallback score when the
external score provider cannot be consulted.
"""

from decimal import Decimal

from .settings import UnderwritingSettings, underwriting_settings


def required_score(
    salary: Decimal,
    settings: UnderwritingSettings = underwriting_settings,
) -> int:
    """
    Minimum credit score required for a salary.

    Bands are checked in ascending order and the first one whose upper
    bound is at or above the salary wins. Salaries above every band get
    ``settings.top_band_score``.

    Args:
        salary: Monthly salary in BRL
        settings: Underwriting settings (uses defaults if not provided)

    Returns:
        Minimum score (400, 500, 600 or 700 with the default bands)
    """
    for upper_bound, min_score in settings.salary_bands:
        if salary <= upper_bound:
            return min_score

    return settings.top_band_score
