"""Data Transfer Objects for application layer."""

from .loan import (
    CreateLoanRequest,
    LoanHistoryResponse,
    LoanResponse,
    SimulateLoanRequest,
    SimulationResponse,
)

__all__ = [
    "CreateLoanRequest",
    "LoanHistoryResponse",
    "LoanResponse",
    "SimulateLoanRequest",
    "SimulationResponse",
]
