"""Base domain exception."""

from typing import Optional


class DomainException(Exception):
    """
    Base exception for all domain-level errors.

    Domain exceptions represent business rule violations or
    domain-specific error conditions. The ``code`` is returned to API
    clients as the machine-readable error identifier.
    """

    def __init__(self, message: str, code: str = "DOMAIN_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)

    def to_dict(self, request_id: Optional[str] = None) -> dict:
        """Error body returned by the API."""
        return {
            "error": self.code,
            "message": self.message,
            "request_id": request_id,
        }
