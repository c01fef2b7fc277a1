"""Applicant-related domain exceptions."""

from .base import DomainException


class ApplicantNotFoundException(DomainException):
    """Raised when the applicant of a loan request does not exist."""

    def __init__(self, applicant_id: str):
        super().__init__(
            message=f"Applicant not found: {applicant_id}",
            code="APPLICANT_NOT_FOUND",
        )
        self.applicant_id = applicant_id
