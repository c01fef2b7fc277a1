"""Loan-related Pydantic schemas."""

from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class SimulateLoanRequestSchema(BaseModel):
    """Schema for POST /v1/loans/simulation request body."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "applicant_id": "0d6b1c4e-3f7a-4c52-9e0b-6a1f2d3c4b5a",
                    "requested_amount": 1000,
                }
            ]
        }
    )
    applicant_id: UUID = Field(
        ...,
        description="Identifier of the employee requesting the loan",
    )
    requested_amount: Decimal = Field(
        ...,
        ge=100,
        max_digits=12,
        decimal_places=2,
        description="Requested principal in BRL",
        examples=[1000],
    )


class CreateLoanRequestSchema(SimulateLoanRequestSchema):
    """Schema for POST /v1/loans request body."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "applicant_id": "0d6b1c4e-3f7a-4c52-9e0b-6a1f2d3c4b5a",
                    "requested_amount": 1000,
                    "installment_count": 3,
                }
            ]
        }
    )
    installment_count: int = Field(
        ...,
        ge=1,
        le=4,
        description="Number of monthly installments",
        examples=[3],
    )


class InstallmentOptionSchema(BaseModel):
    """One simulated installment option."""

    count: int = Field(..., ge=1, le=4, description="Number of installments")
    value_per_installment: float = Field(
        ...,
        description="Value of each installment, rounded to cents",
        examples=[333.33],
    )


class SimulationResponseSchema(BaseModel):
    """Schema for POST /v1/loans/simulation response body."""

    requested_amount: float = Field(..., description="Requested principal in BRL")
    margin: float = Field(
        ...,
        description="Credit margin (35% of salary) in BRL",
        examples=[1750.0],
    )
    options: list[InstallmentOptionSchema] = Field(
        ...,
        description="Installment options from 1 to 4 installments",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "requested_amount": 1000.0,
                    "margin": 1750.0,
                    "options": [
                        {"count": 1, "value_per_installment": 1000.0},
                        {"count": 2, "value_per_installment": 500.0},
                        {"count": 3, "value_per_installment": 333.33},
                        {"count": 4, "value_per_installment": 250.0},
                    ],
                }
            ]
        }
    )


class LoanResponseSchema(BaseModel):
    """Schema for POST /v1/loans response body."""

    loan_id: str = Field(..., description="UUID of the loan")
    applicant_id: str = Field(..., description="Employee who requested the loan")
    status: str = Field(
        ...,
        description="Underwriting outcome",
        examples=["APPROVED"],
    )
    score: float = Field(..., description="Credit score used in the decision")
    requested_amount: float = Field(..., description="Principal in BRL")
    installment_count: int = Field(..., ge=1, le=4)
    rejection_reason: Optional[str] = Field(None)
    created_at: str = Field(..., description="ISO 8601 timestamp of the request")


class InstallmentSchema(BaseModel):
    """Schema for an installment in loan listings."""

    number: int = Field(..., ge=1, description="Installment number, 1-based")
    value: float = Field(..., gt=0, description="Installment value in BRL")
    due_date: str = Field(
        ...,
        description="Due date in ISO 8601 format (YYYY-MM-DD)",
        examples=["2025-11-17"],
    )


class EmployerSchema(BaseModel):
    """Summary of the applicant's employer."""

    representative_name: str
    legal_name: str
    cnpj: str


class LoanSummarySchema(BaseModel):
    """A loan with its schedule in listings."""

    loan_id: str
    status: str
    score: float
    requested_amount: float
    installment_count: int
    rejection_reason: Optional[str] = None
    created_at: str
    installments: list[InstallmentSchema]
    employer: Optional[EmployerSchema] = None


class LoanHistoryResponseSchema(BaseModel):
    """Schema for GET /v1/loans response."""

    applicant_id: str = Field(..., description="The applicant's identifier")
    loans: list[LoanSummarySchema] = Field(
        ...,
        description="Loans of the applicant, newest first",
    )
