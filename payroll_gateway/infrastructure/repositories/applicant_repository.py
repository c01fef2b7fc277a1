"""PostgreSQL implementation of ApplicantRepository."""

from decimal import Decimal
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from payroll_gateway.domain.entities import Applicant, EmployerSummary
from payroll_gateway.domain.interfaces import ApplicantRepository
from payroll_gateway.infrastructure.database.models import EmployeeModel


class PostgresApplicantRepository(ApplicantRepository):
    """Reads applicants from the employees table."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_by_id(self, applicant_id: str) -> Optional[Applicant]:
        stmt = (
            select(EmployeeModel)
            .options(selectinload(EmployeeModel.company))
            .where(EmployeeModel.id == applicant_id)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return Applicant(
            id=str(model.id),
            name=model.name,
            salary=Decimal(str(model.salary)),
            employer_id=str(model.company_id),
            employer=EmployerSummary(
                representative_name=model.company.representative_name,
                legal_name=model.company.legal_name,
                cnpj=model.company.cnpj,
            ),
        )
