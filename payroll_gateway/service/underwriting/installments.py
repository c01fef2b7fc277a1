"""
Installment Calculator for loan simulations.

Simulations show every installment option side by side so the applicant
can pick one. Values here are rounded half-up to cents; the schedule
generated after approval is not (see ``schedule.py``).
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import List

from payroll_gateway.domain.entities import InstallmentOption

from .settings import UnderwritingSettings, underwriting_settings

CENTS = Decimal("0.01")


def round_half_up(value: Decimal) -> Decimal:
    """Round to 2 decimal places, halves away from zero."""
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)


def calculate_installment_options(
    principal: Decimal,
    settings: UnderwritingSettings = underwriting_settings,
) -> List[InstallmentOption]:
    """
    Break a principal into 1..N equal installments.

    Args:
        principal: Requested amount in BRL
        settings: Underwriting settings (``max_installments`` is N)

    Returns:
        Exactly N options, ordered by installment count

    Example:
        1000 -> [(1, 1000.00), (2, 500.00), (3, 333.33), (4, 250.00)]
    """
    return [
        InstallmentOption(
            count=count,
            value_per_installment=round_half_up(principal / count),
        )
        for count in range(1, settings.max_installments + 1)
    ]
