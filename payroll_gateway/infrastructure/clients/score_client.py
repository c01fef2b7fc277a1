"""HTTP implementation of CreditScoreClient."""

import asyncio
import math
from typing import Any

import httpx
import structlog

from payroll_gateway.core.config import settings
from payroll_gateway.core.metrics import track_score_fetch_latency
from payroll_gateway.domain.entities import ScoreResult
from payroll_gateway.domain.interfaces import CreditScoreClient

logger = structlog.get_logger(__name__)


class HttpCreditScoreClient(CreditScoreClient):
    """
    HTTP client for the credit score provider.

    Every failure is folded into an unavailable ScoreResult; nothing is raised.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        max_retries: int | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._base_url = base_url or settings.score_api_url
        self._timeout = timeout or settings.score_api_timeout
        self._max_retries = max(1, max_retries or settings.score_api_max_retries)
        self._transport = transport

    async def fetch_score(self, applicant_id: str) -> ScoreResult:
        """
        Fetch the applicant's score, retrying with exponential backoff.

        Each attempt is bounded by the configured timeout.
        """
        params = {"applicant_id": applicant_id}
        error = "score provider not called"

        for attempt in range(self._max_retries):
            try:
                with track_score_fetch_latency():
                    async with httpx.AsyncClient(
                        timeout=self._timeout,
                        transport=self._transport,
                    ) as client:
                        response = await client.get(self._base_url, params=params)

                if response.status_code >= 400:
                    error = f"score provider returned {response.status_code}"
                else:
                    score = self._parse_score(response.json())
                    logger.info(
                        "score_provider_responded",
                        applicant_id=applicant_id,
                        score=score,
                    )
                    return ScoreResult.ok(score)

            except httpx.TimeoutException:
                error = "score provider timed out"
            except httpx.HTTPError as e:
                error = f"score provider unreachable: {e}"
            except ValueError as e:
                error = f"malformed score response: {e}"
            except Exception as e:
                error = f"unexpected error: {e}"

            logger.warning(
                "score_provider_failed",
                applicant_id=applicant_id,
                attempt=attempt + 1,
                max_retries=self._max_retries,
                error=error,
            )

            if attempt < self._max_retries - 1:
                await asyncio.sleep(2**attempt * 0.1)

        return ScoreResult.unavailable(error)

    def _parse_score(self, data: Any) -> float:
        """Extract the numeric score field, as returned by the provider."""
        if not isinstance(data, dict) or "score" not in data:
            raise ValueError("missing 'score' field")

        score = data["score"]
        if isinstance(score, bool) or not isinstance(score, (int, float)):
            raise ValueError(f"non-numeric score: {score!r}")
        if isinstance(score, float) and not math.isfinite(score):
            raise ValueError(f"non-finite score: {score!r}")

        return score
