"""Data transfer objects for loan simulation and origination."""

from dataclasses import dataclass
from decimal import Decimal
from typing import List, Optional

from payroll_gateway.service.underwriting import UnderwritingSettings, underwriting_settings


def _validate_common(
    applicant_id: str,
    requested_amount: Decimal,
    settings: UnderwritingSettings,
) -> List[str]:
    errors = []

    if not applicant_id or not applicant_id.strip():
        errors.append("applicant_id is required")

    if requested_amount < settings.min_amount:
        errors.append(f"requested_amount must be at least {settings.min_amount}")

    return errors


@dataclass(frozen=True)
class SimulateLoanRequest:
    """Input data for simulating installment options."""
    applicant_id: str
    requested_amount: Decimal

    def validate(self, settings: UnderwritingSettings = underwriting_settings) -> List[str]:
        return _validate_common(self.applicant_id, self.requested_amount, settings)


@dataclass(frozen=True)
class CreateLoanRequest:
    """Input data for requesting a loan."""
    applicant_id: str
    requested_amount: Decimal
    installment_count: int

    def validate(self, settings: UnderwritingSettings = underwriting_settings) -> List[str]:
        errors = _validate_common(self.applicant_id, self.requested_amount, settings)

        if not 1 <= self.installment_count <= settings.max_installments:
            errors.append(
                f"installment_count must be between 1 and {settings.max_installments}"
            )

        return errors


@dataclass(frozen=True)
class InstallmentOptionDTO:
    count: int
    value_per_installment: float


@dataclass(frozen=True)
class SimulationResponse:
    """Installment options for a requested amount."""

    requested_amount: float
    margin: float
    options: List[InstallmentOptionDTO]

    @classmethod
    def from_entity(cls, simulation) -> "SimulationResponse":
        return cls(
            requested_amount=float(simulation.requested_amount),
            margin=float(simulation.margin),
            options=[
                InstallmentOptionDTO(
                    count=option.count,
                    value_per_installment=float(option.value_per_installment),
                )
                for option in simulation.options
            ],
        )


@dataclass(frozen=True)
class LoanResponse:
    """Response data for a created loan. The schedule is not included."""

    loan_id: str
    applicant_id: str
    status: str
    score: float
    requested_amount: float
    installment_count: int
    rejection_reason: Optional[str]
    created_at: str

    @classmethod
    def from_entity(cls, loan) -> "LoanResponse":
        return cls(
            loan_id=str(loan.id),
            applicant_id=loan.applicant_id,
            status=loan.status.value,
            score=loan.score,
            requested_amount=float(loan.requested_amount),
            installment_count=loan.installment_count,
            rejection_reason=loan.rejection_reason,
            created_at=loan.created_at_iso,
        )


@dataclass(frozen=True)
class InstallmentDTO:
    """Single installment within a loan listing."""
    number: int
    value: float
    due_date: str


@dataclass(frozen=True)
class EmployerDTO:
    representative_name: str
    legal_name: str
    cnpj: str


@dataclass(frozen=True)
class LoanSummary:
    """A loan with its installments and employer, for listings."""

    loan_id: str
    status: str
    score: float
    requested_amount: float
    installment_count: int
    rejection_reason: Optional[str]
    created_at: str
    installments: List[InstallmentDTO]
    employer: Optional[EmployerDTO]


@dataclass(frozen=True)
class LoanHistoryResponse:
    """Response containing every loan of an applicant."""

    applicant_id: str
    loans: List[LoanSummary]

    @classmethod
    def from_entities(cls, applicant_id: str, loans: list) -> "LoanHistoryResponse":
        summaries = [
            LoanSummary(
                loan_id=str(loan.id),
                status=loan.status.value,
                score=loan.score,
                requested_amount=float(loan.requested_amount),
                installment_count=loan.installment_count,
                rejection_reason=loan.rejection_reason,
                created_at=loan.created_at_iso,
                installments=[
                    InstallmentDTO(
                        number=inst.number,
                        value=float(inst.value),
                        due_date=inst.due_date.isoformat(),
                    )
                    for inst in loan.installments
                ],
                employer=(
                    EmployerDTO(
                        representative_name=loan.employer.representative_name,
                        legal_name=loan.employer.legal_name,
                        cnpj=loan.employer.cnpj,
                    )
                    if loan.employer
                    else None
                ),
            )
            for loan in loans
        ]
        return cls(applicant_id=applicant_id, loans=summaries)
