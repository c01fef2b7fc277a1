"""Repository implementations."""

from .applicant_repository import PostgresApplicantRepository
from .loan_repository import PostgresLoanRepository
from .installment_repository import PostgresInstallmentRepository

__all__ = [
    "PostgresApplicantRepository",
    "PostgresLoanRepository",
    "PostgresInstallmentRepository",
]
