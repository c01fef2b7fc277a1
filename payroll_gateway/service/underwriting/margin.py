"""Credit margin rule: the share of the salary that may be lent."""

from decimal import Decimal

from .settings import UnderwritingSettings, underwriting_settings


def credit_margin(
    salary: Decimal,
    settings: UnderwritingSettings = underwriting_settings,
) -> Decimal:
    """Maximum principal an applicant may request (35% of salary by default)."""
    return salary * settings.margin_rate


def exceeds_margin(
    requested_amount: Decimal,
    salary: Decimal,
    settings: UnderwritingSettings = underwriting_settings,
) -> bool:
    """True when the requested principal is above the credit margin."""
    return requested_amount > credit_margin(salary, settings)
