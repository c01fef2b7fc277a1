"""Pydantic schemas for API request/response validation."""

from .loan import (
    CreateLoanRequestSchema,
    EmployerSchema,
    InstallmentOptionSchema,
    InstallmentSchema,
    LoanHistoryResponseSchema,
    LoanResponseSchema,
    LoanSummarySchema,
    SimulateLoanRequestSchema,
    SimulationResponseSchema,
)
from .error import ErrorResponseSchema

__all__ = [
    "CreateLoanRequestSchema",
    "EmployerSchema",
    "InstallmentOptionSchema",
    "InstallmentSchema",
    "LoanHistoryResponseSchema",
    "LoanResponseSchema",
    "LoanSummarySchema",
    "SimulateLoanRequestSchema",
    "SimulationResponseSchema",
    "ErrorResponseSchema",
]
