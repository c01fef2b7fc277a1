"""External API client implementations."""

from .score_client import HttpCreditScoreClient
from .payment_client import HttpPaymentSimulatorClient

__all__ = [
    "HttpCreditScoreClient",
    "HttpPaymentSimulatorClient",
]
