"""Loan API endpoints."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from payroll_gateway.application.dto import CreateLoanRequest, SimulateLoanRequest
from payroll_gateway.application.services import LoanService
from payroll_gateway.core.dependencies import get_loan_service
from payroll_gateway.presentation.schemas import (
    CreateLoanRequestSchema,
    EmployerSchema,
    ErrorResponseSchema,
    InstallmentOptionSchema,
    InstallmentSchema,
    LoanHistoryResponseSchema,
    LoanResponseSchema,
    LoanSummarySchema,
    SimulateLoanRequestSchema,
    SimulationResponseSchema,
)

loan_router = APIRouter(
    prefix="/loans",
    responses={
        400: {"model": ErrorResponseSchema, "description": "Invalid request or unknown applicant"},
    },
)


@loan_router.post(
    "/simulation",
    response_model=SimulationResponseSchema,
    status_code=200,
    summary="Simulate Loan",
    description="""
    Simulate the installment options for a requested amount.

    The amount must not exceed the credit margin (35% of the salary).
    Nothing is persisted.
    """,
    responses={
        200: {"description": "Simulation computed successfully"},
    },
)
async def simulate_loan(
    request: SimulateLoanRequestSchema,
    loan_service: Annotated[LoanService, Depends(get_loan_service)],
) -> SimulationResponseSchema:
    dto = SimulateLoanRequest(
        applicant_id=str(request.applicant_id),
        requested_amount=request.requested_amount,
    )

    response = await loan_service.simulate(dto)

    return SimulationResponseSchema(
        requested_amount=response.requested_amount,
        margin=response.margin,
        options=[
            InstallmentOptionSchema(
                count=option.count,
                value_per_installment=option.value_per_installment,
            )
            for option in response.options
        ],
    )


@loan_router.post(
    "",
    response_model=LoanResponseSchema,
    status_code=201,
    summary="Request Loan",
    description="""
    Request a salary-deducted loan.

    The loan is approved when the applicant's credit score reaches the
    minimum for their salary band. Approved loans get a monthly
    installment schedule and a payment confirmation.
    """,
    responses={
        201: {"description": "Loan recorded (approved or rejected)"},
        409: {
            "model": ErrorResponseSchema,
            "description": "Amount above the credit margin, or payment not approved",
        },
    },
)
async def create_loan(
    request: CreateLoanRequestSchema,
    loan_service: Annotated[LoanService, Depends(get_loan_service)],
) -> LoanResponseSchema:
    dto = CreateLoanRequest(
        applicant_id=str(request.applicant_id),
        requested_amount=request.requested_amount,
        installment_count=request.installment_count,
    )

    response = await loan_service.create_loan(dto)

    return LoanResponseSchema(
        loan_id=response.loan_id,
        applicant_id=response.applicant_id,
        status=response.status,
        score=response.score,
        requested_amount=response.requested_amount,
        installment_count=response.installment_count,
        rejection_reason=response.rejection_reason,
        created_at=response.created_at,
    )


@loan_router.get(
    "",
    response_model=LoanHistoryResponseSchema,
    summary="List Loans",
    description="""
    List every loan of an applicant, newest first, with installments
    and employer details.
    """,
    responses={
        200: {"description": "Loans retrieved successfully"},
    },
)
async def list_loans(
    applicant_id: Annotated[
        UUID,
        Query(description="Applicant ID to list loans for"),
    ],
    loan_service: Annotated[LoanService, Depends(get_loan_service)],
) -> LoanHistoryResponseSchema:
    response = await loan_service.list_loans(str(applicant_id))

    return LoanHistoryResponseSchema(
        applicant_id=response.applicant_id,
        loans=[
            LoanSummarySchema(
                loan_id=loan.loan_id,
                status=loan.status,
                score=loan.score,
                requested_amount=loan.requested_amount,
                installment_count=loan.installment_count,
                rejection_reason=loan.rejection_reason,
                created_at=loan.created_at,
                installments=[
                    InstallmentSchema(
                        number=inst.number,
                        value=inst.value,
                        due_date=inst.due_date,
                    )
                    for inst in loan.installments
                ],
                employer=(
                    EmployerSchema(
                        representative_name=loan.employer.representative_name,
                        legal_name=loan.employer.legal_name,
                        cnpj=loan.employer.cnpj,
                    )
                    if loan.employer
                    else None
                ),
            )
            for loan in response.loans
        ],
    )
