"""Applicant entity representing an employee who can request loans."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class EmployerSummary:
    """Identification of the company that employs an applicant."""

    representative_name: str
    legal_name: str
    cnpj: str


@dataclass(frozen=True)
class Applicant:
    """
    An employee of a registered company.

    The salary is read once per underwriting request and is not locked,
    so two concurrent requests may both see the same snapshot.
    """

    id: str
    name: str
    salary: Decimal
    employer_id: str
    employer: Optional[EmployerSummary] = None
