"""Approval rule for loan underwriting."""

from decimal import Decimal

from payroll_gateway.domain.entities import ApprovalStatus

from .salary_bands import required_score
from .settings import UnderwritingSettings, underwriting_settings


def decide(
    score: float,
    salary: Decimal,
    settings: UnderwritingSettings = underwriting_settings,
) -> ApprovalStatus:
    """
    Approve when the score reaches the minimum required for the salary band.

    Args:
        score: Credit score used for the decision (external or fallback)
        salary: Applicant's monthly salary
        settings: Underwriting settings (uses defaults if not provided)

    Returns:
        APPROVED if ``score >= required_score(salary)``, REJECTED otherwise
    """
    if score < required_score(salary, settings):
        return ApprovalStatus.REJECTED
    return ApprovalStatus.APPROVED
