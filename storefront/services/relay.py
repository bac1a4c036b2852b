"""
Webhook Relay

Posts order, contact and inquiry submissions to the spreadsheet webhooks
from the server side, so delivery can be confirmed.
"""

import logging
from typing import Any, Optional

import httpx

from ..models.checkout import SubmissionResult

logger = logging.getLogger(__name__)


class WebhookRelay:
    """Client for the spreadsheet-backed submission webhooks"""

    def __init__(
        self,
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self._timeout = timeout
        self._owns_client = client is None
        self._http_client = client or httpx.AsyncClient(follow_redirects=True)

    async def close(self) -> None:
        """Close HTTP client"""
        if self._owns_client:
            await self._http_client.aclose()

    async def submit(self, url: str, payload: dict[str, Any]) -> SubmissionResult:
        """
        POST a JSON payload to a webhook.

        Never raises: failures are reported through the result.
        """
        if not url:
            logger.warning("Submission dropped: webhook not configured")
            return SubmissionResult(delivered=False, error="webhook not configured")

        try:
            response = await self._http_client.post(
                url,
                json=payload,
                headers={"Content-Type": "application/json"},
                timeout=self._timeout,
            )
        except httpx.HTTPError as e:
            logger.error(f"Webhook request failed: {e!r}")
            return SubmissionResult(delivered=False, error=str(e) or type(e).__name__)

        if not response.is_success:
            logger.error(f"Webhook rejected submission: {response.status_code} - {response.text[:200]}")
            return SubmissionResult(
                delivered=False,
                status_code=response.status_code,
                error=f"HTTP {response.status_code}",
            )

        logger.info(f"Webhook accepted submission: {response.status_code}")
        return SubmissionResult(delivered=True, status_code=response.status_code)
