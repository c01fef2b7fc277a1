"""Loan underwriting domain exceptions."""

from decimal import Decimal

from .base import DomainException


class ConflictException(DomainException):
    """Business rule violation reported to the caller as a conflict."""


class SimulationMarginExceededException(DomainException):
    """Raised by a simulation when the requested amount exceeds the credit margin."""

    def __init__(self, requested_amount: Decimal, margin: Decimal):
        super().__init__(
            message=(
                f"Requested amount (R$ {requested_amount:.2f}) exceeds the "
                f"available credit margin (R$ {margin:.2f})"
            ),
            code="CREDIT_MARGIN_EXCEEDED",
        )
        self.requested_amount = requested_amount
        self.margin = margin


class LoanMarginConflictException(ConflictException):
    """Raised on loan creation when the requested amount exceeds the credit margin."""

    def __init__(self, requested_amount: Decimal, margin: Decimal):
        super().__init__(
            message="Requested loan exceeds the credit margin",
            code="CREDIT_MARGIN_EXCEEDED",
        )
        self.requested_amount = requested_amount
        self.margin = margin


class PaymentNotApprovedException(ConflictException):
    """Raised when the payment simulator explicitly declines an approved loan."""

    def __init__(self, loan_id: str, status: str):
        super().__init__(
            message="Loan payment was not approved",
            code="PAYMENT_NOT_APPROVED",
        )
        self.loan_id = loan_id
        self.status = status


class InstallmentScheduleException(DomainException):
    """Raised when persisting an installment schedule fails part way."""

    def __init__(self, loan_id: str, written: int, expected: int):
        super().__init__(
            message=(
                f"Installment schedule for loan {loan_id} failed after "
                f"{written} of {expected} installments"
            ),
            code="INSTALLMENT_SCHEDULE_FAILED",
        )
        self.loan_id = loan_id
        self.written = written
        self.expected = expected


class InvalidLoanRequestException(DomainException):
    """Raised when a loan request fails validation."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            code="INVALID_LOAN_REQUEST",
        )
