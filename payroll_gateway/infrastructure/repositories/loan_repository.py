"""PostgreSQL implementation of LoanRepository."""

from decimal import Decimal
from typing import List
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from payroll_gateway.domain.entities import (
    ApprovalStatus,
    EmployerSummary,
    Installment,
    LoanApplication,
)
from payroll_gateway.domain.interfaces import LoanRepository
from payroll_gateway.infrastructure.database.models import EmployeeModel, LoanModel


class PostgresLoanRepository(LoanRepository):
    """
    PostgreSQL implementation of the Loan repository.

    ``save`` commits immediately: the underwriting decision stays recorded
    even when a later step of the same request fails.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, loan: LoanApplication) -> LoanApplication:
        """Persist a loan application and commit it."""
        model = LoanModel(
            id=str(loan.id),
            employee_id=loan.applicant_id,
            requested_amount=loan.requested_amount,
            installment_count=loan.installment_count,
            score_used=float(loan.score),
            approval_status=loan.status.value,
            rejection_reason=loan.rejection_reason,
            created_at=loan.created_at,
        )

        self._session.add(model)
        await self._session.commit()

        return loan

    async def get_by_applicant_id(self, applicant_id: str) -> List[LoanApplication]:
        """Retrieve an applicant's loans, newest first."""
        stmt = (
            select(LoanModel)
            .options(
                selectinload(LoanModel.installments),
                selectinload(LoanModel.employee).selectinload(EmployeeModel.company),
            )
            .where(LoanModel.employee_id == applicant_id)
            .order_by(LoanModel.created_at.desc())
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        models = result.scalars().all()

        return [self._to_entity(model) for model in models]

    def _to_entity(self, model: LoanModel) -> LoanApplication:
        """Convert database model to domain entity."""
        loan_id = UUID(str(model.id))
        company = model.employee.company

        return LoanApplication(
            id=loan_id,
            applicant_id=str(model.employee_id),
            requested_amount=Decimal(str(model.requested_amount)),
            installment_count=model.installment_count,
            score=model.score_used,
            status=ApprovalStatus(model.approval_status),
            rejection_reason=model.rejection_reason,
            created_at=model.created_at,
            installments=[
                Installment(
                    id=UUID(str(inst.id)),
                    loan_id=loan_id,
                    number=inst.number,
                    value=Decimal(str(inst.value)),
                    due_date=inst.due_date,
                )
                for inst in model.installments
            ],
            employer=EmployerSummary(
                representative_name=company.representative_name,
                legal_name=company.legal_name,
                cnpj=company.cnpj,
            ),
        )
