"""Domain Entities - Core business objects."""

from .applicant import Applicant, EmployerSummary
from .loan import ApprovalStatus, Installment, LoanApplication
from .score import ScoreResult, ScoreSource
from .simulation import InstallmentOption, LoanSimulation

__all__ = [
    "Applicant",
    "EmployerSummary",
    "ApprovalStatus",
    "Installment",
    "LoanApplication",
    "ScoreResult",
    "ScoreSource",
    "InstallmentOption",
    "LoanSimulation",
]
