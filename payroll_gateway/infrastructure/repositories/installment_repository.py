"""PostgreSQL implementation of InstallmentRepository."""

from sqlalchemy.ext.asyncio import AsyncSession

from payroll_gateway.domain.entities import Installment
from payroll_gateway.domain.interfaces import InstallmentRepository
from payroll_gateway.infrastructure.database.models import InstallmentModel


class PostgresInstallmentRepository(InstallmentRepository):
    """
    PostgreSQL-backed installment repository.

    Each installment is committed on its own, so a failure part way through
    a schedule leaves the earlier installments in place.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, installment: Installment) -> Installment:
        model = InstallmentModel(
            id=str(installment.id),
            loan_id=str(installment.loan_id),
            number=installment.number,
            value=installment.value,
            due_date=installment.due_date,
        )

        self._session.add(model)
        await self._session.commit()

        return installment
