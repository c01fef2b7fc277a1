"""Dependency injection for FastAPI."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from payroll_gateway.infrastructure.database import get_db_session
from payroll_gateway.infrastructure.repositories import (
    PostgresApplicantRepository,
    PostgresInstallmentRepository,
    PostgresLoanRepository,
)
from payroll_gateway.infrastructure.clients import (
    HttpCreditScoreClient,
    HttpPaymentSimulatorClient,
)
from payroll_gateway.application.services import LoanService


# Repository dependencies
async def get_applicant_repository(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> PostgresApplicantRepository:
    """Get an ApplicantRepository instance."""
    return PostgresApplicantRepository(session)


async def get_loan_repository(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> PostgresLoanRepository:
    """Get a LoanRepository instance."""
    return PostgresLoanRepository(session)


async def get_installment_repository(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> PostgresInstallmentRepository:
    """Get an InstallmentRepository instance."""
    return PostgresInstallmentRepository(session)


# External client dependencies
def get_score_client() -> HttpCreditScoreClient:
    """Get a CreditScoreClient instance."""
    return HttpCreditScoreClient()


def get_payment_client() -> HttpPaymentSimulatorClient:
    """Get a PaymentSimulatorClient instance."""
    return HttpPaymentSimulatorClient()


# Service dependencies
async def get_loan_service(
    applicant_repo: Annotated[PostgresApplicantRepository, Depends(get_applicant_repository)],
    loan_repo: Annotated[PostgresLoanRepository, Depends(get_loan_repository)],
    installment_repo: Annotated[
        PostgresInstallmentRepository, Depends(get_installment_repository)
    ],
    score_client: Annotated[HttpCreditScoreClient, Depends(get_score_client)],
    payment_client: Annotated[HttpPaymentSimulatorClient, Depends(get_payment_client)],
) -> LoanService:
    """Get a LoanService instance with all dependencies."""
    return LoanService(
        applicant_repository=applicant_repo,
        loan_repository=loan_repo,
        installment_repository=installment_repo,
        score_client=score_client,
        payment_client=payment_client,
    )
