"""Domain Exceptions - Business rule violations and domain errors."""

from .base import DomainException
from .applicant import ApplicantNotFoundException
from .loan import (
    ConflictException,
    InstallmentScheduleException,
    InvalidLoanRequestException,
    LoanMarginConflictException,
    PaymentNotApprovedException,
    SimulationMarginExceededException,
)
from .payment import PaymentGatewayUnavailableException

__all__ = [
    "DomainException",
    "ApplicantNotFoundException",
    "ConflictException",
    "InstallmentScheduleException",
    "InvalidLoanRequestException",
    "LoanMarginConflictException",
    "PaymentNotApprovedException",
    "SimulationMarginExceededException",
    "PaymentGatewayUnavailableException",
]
