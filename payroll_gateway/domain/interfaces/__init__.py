"""
Domain Interfaces (Ports)
"""

from .repositories import ApplicantRepository, InstallmentRepository, LoanRepository
from .clients import CreditScoreClient, PaymentSimulatorClient

__all__ = [
    "ApplicantRepository",
    "InstallmentRepository",
    "LoanRepository",
    "CreditScoreClient",
    "PaymentSimulatorClient",
]
