"""Value objects returned by a loan simulation."""

from dataclasses import dataclass
from decimal import Decimal
from typing import List


@dataclass(frozen=True)
class InstallmentOption:
    """One row of the simulated breakdown: pay in ``count`` installments of ``value``."""

    count: int
    value_per_installment: Decimal


@dataclass(frozen=True)
class LoanSimulation:
    """Simulated installment options for a requested amount."""

    requested_amount: Decimal
    margin: Decimal
    options: List[InstallmentOption]
