"""Loan application and installment domain entities."""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import List, Optional
from uuid import UUID, uuid4

from .applicant import EmployerSummary


class ApprovalStatus(str, Enum):
    """Outcome of underwriting, set once when the loan is created."""

    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


@dataclass
class Installment:
    """A single monthly repayment of an approved loan."""

    loan_id: UUID
    number: int
    value: Decimal
    due_date: date
    id: UUID = field(default_factory=uuid4)


@dataclass
class LoanApplication:
    """
    A salary-deducted loan request and its underwriting outcome.

    Every field is set at creation time; there is no update path.
    ``rejection_reason`` is kept for the persisted shape but never filled.
    """

    applicant_id: str
    requested_amount: Decimal
    installment_count: int
    score: float
    status: ApprovalStatus
    id: UUID = field(default_factory=uuid4)
    rejection_reason: Optional[str] = None
    created_at: datetime = field(default_factory=datetime.utcnow)
    installments: List[Installment] = field(default_factory=list)
    employer: Optional[EmployerSummary] = None

    @property
    def approved(self) -> bool:
        return self.status == ApprovalStatus.APPROVED

    @property
    def created_at_iso(self) -> str:
        """Creation time as an ISO 8601 UTC string with a ``Z`` suffix."""
        created_at = self.created_at
        if created_at.tzinfo is not None:
            created_at = created_at.astimezone(timezone.utc).replace(tzinfo=None)
        return created_at.isoformat() + "Z"
