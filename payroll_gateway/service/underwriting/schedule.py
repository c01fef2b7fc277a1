"""
Installment Schedule generation for approved loans.

Each installment is worth ``principal / count`` at full decimal precision.
This intentionally differs from the simulation breakdown, which rounds to
cents, so schedule values are not expected to equal simulated values.
"""

from datetime import date
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from dateutil.relativedelta import relativedelta

from payroll_gateway.domain.entities import Installment


def installment_value(principal: Decimal, count: int) -> Decimal:
    """Unrounded value of each installment."""
    return principal / count


def build_installment_schedule(
    loan_id: UUID,
    principal: Decimal,
    count: int,
    start_date: Optional[date] = None,
) -> List[Installment]:
    """
    Build the monthly installments of a loan.

    Installment ``i`` (1-based) is due ``i`` calendar months after the
    start date. The day of month is kept when it exists in the target
    month and clamped to the month's last day otherwise (Jan 31 -> Feb 28).

    Args:
        loan_id: The loan the installments belong to
        principal: Approved principal in BRL
        count: Number of installments
        start_date: Reference date (default: today)

    Returns:
        ``count`` installments numbered 1..count
    """
    if start_date is None:
        start_date = date.today()

    value = installment_value(principal, count)

    return [
        Installment(
            loan_id=loan_id,
            number=number,
            value=value,
            due_date=start_date + relativedelta(months=number),
        )
        for number in range(1, count + 1)
    ]
