"""HTTP implementation of PaymentSimulatorClient."""

import httpx
import structlog

from payroll_gateway.core.config import settings
from payroll_gateway.core.metrics import track_payment_latency
from payroll_gateway.domain.exceptions import PaymentGatewayUnavailableException
from payroll_gateway.domain.interfaces import PaymentSimulatorClient

logger = structlog.get_logger(__name__)


class HttpPaymentSimulatorClient(PaymentSimulatorClient):
    """
    HTTP client for the payment simulator.

    A single attempt bounded by the configured timeout. Transport problems
    are raised as PaymentGatewayUnavailableException; the status itself is
    returned untouched for the caller to interpret.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._base_url = base_url or settings.payment_api_url
        self._timeout = timeout or settings.payment_api_timeout
        self._transport = transport

    async def check(self, loan_id: str, applicant_id: str) -> str:
        params = {"loan_id": loan_id, "applicant_id": applicant_id}

        try:
            with track_payment_latency():
                async with httpx.AsyncClient(
                    timeout=self._timeout,
                    transport=self._transport,
                ) as client:
                    response = await client.get(self._base_url, params=params)
        except httpx.TimeoutException:
            raise PaymentGatewayUnavailableException("Payment simulator timed out")
        except httpx.HTTPError as e:
            raise PaymentGatewayUnavailableException(
                f"Payment simulator unreachable: {e}"
            )

        if response.status_code >= 400:
            raise PaymentGatewayUnavailableException(
                message=f"Payment simulator error: {response.text[:200]}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError:
            raise PaymentGatewayUnavailableException("Malformed payment response")

        status = data.get("status") if isinstance(data, dict) else None
        if not isinstance(status, str):
            raise PaymentGatewayUnavailableException(
                "Payment response has no status field"
            )

        logger.info(
            "payment_simulator_responded",
            loan_id=loan_id,
            status=status,
        )
        return status
