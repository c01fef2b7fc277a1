"""External client interfaces."""

from abc import ABC, abstractmethod

from payroll_gateway.domain.entities import ScoreResult


class CreditScoreClient(ABC):
    """
    Abstract client for the credit score provider.

    Never raises: any failure is reported as an unavailable result so the
    caller decides how to fall back.
    """

    @abstractmethod
    async def fetch_score(self, applicant_id: str) -> ScoreResult:
        """
        Fetch the credit score of an applicant.

        Args:
            applicant_id: The applicant's identifier

        Returns:
            ScoreResult holding the provider score, or the error description
            when the provider could not be consulted
        """
        ...


class PaymentSimulatorClient(ABC):
    """
    Abstract client for the payment simulator.

    Confirms payment of an already committed loan.
    """

    @abstractmethod
    async def check(self, loan_id: str, applicant_id: str) -> str:
        """
        Ask the simulator for the payment status of a loan.

        Args:
            loan_id: The loan's identifier
            applicant_id: The applicant's identifier

        Returns:
            The status reported by the simulator, verbatim

        Raises:
            PaymentGatewayUnavailableException: On timeout, network failure,
                non-2xx response or malformed body
        """
        ...
