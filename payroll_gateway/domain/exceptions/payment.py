"""Payment simulator-related domain exceptions."""

from .base import DomainException


class PaymentGatewayUnavailableException(DomainException):
    """Raised when the payment simulator cannot be reached or answers garbage."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(
            message=message,
            code="PAYMENT_GATEWAY_UNAVAILABLE",
        )
        self.status_code = status_code
