"""Repository interfaces for data persistence."""

from abc import ABC, abstractmethod
from typing import List, Optional

from payroll_gateway.domain.entities import Applicant, Installment, LoanApplication


class ApplicantRepository(ABC):
    """
    Abstract repository for reading applicants (employees).

    Employee registration lives outside this service; only lookups
    by identifier are needed here.
    """

    @abstractmethod
    async def get_by_id(self, applicant_id: str) -> Optional[Applicant]:
        """
        Retrieve an applicant by ID.

        Args:
            applicant_id: The applicant's unique identifier

        Returns:
            The applicant if found, None otherwise
        """
        ...


class LoanRepository(ABC):
    """
    Abstract repository for LoanApplication persistence.

    Implementations may use PostgreSQL, in-memory storage, etc.
    """

    @abstractmethod
    async def save(self, loan: LoanApplication) -> LoanApplication:
        """
        Persist a loan application.

        A single insert; callers must not retry on failure.

        Args:
            loan: The loan to save

        Returns:
            The saved loan with any generated fields populated
        """
        ...

    @abstractmethod
    async def get_by_applicant_id(self, applicant_id: str) -> List[LoanApplication]:
        """
        Retrieve every loan of an applicant.

        Args:
            applicant_id: The applicant's identifier

        Returns:
            Loans with their installments and employer summary,
            ordered by created_at descending
        """
        ...


class InstallmentRepository(ABC):
    """Abstract repository for Installment persistence."""

    @abstractmethod
    async def save(self, installment: Installment) -> Installment:
        """
        Persist a single installment.

        Called once per installment; schedules are not written in batches.

        Args:
            installment: The installment to save

        Returns:
            The saved installment
        """
        ...
