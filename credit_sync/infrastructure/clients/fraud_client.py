"""HTTP implementation of FraudCheckClient."""

import httpx
import structlog

from credit_sync.core.config import settings
from credit_sync.domain.exceptions import (
    ExternalAPIException,
    ExternalTimeoutException,
)
from credit_sync.domain.interfaces import FraudCheckClient

logger = structlog.get_logger(__name__)

SERVICE_NAME = "fraud_api"


class HttpFraudCheckClient(FraudCheckClient):
    """HTTP client for the fraud-check service."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._base_url = (base_url or settings.fraud_api_url).rstrip("/")
        self._timeout = timeout or settings.fraud_api_timeout
        self._transport = transport

    async def is_fraudulent(self, client_id: str) -> bool:
        """Ask the fraud service whether a client is flagged."""
        try:
            async with httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                response = await client.get(f"/fraud/clients/{client_id}")
        except httpx.TimeoutException as e:
            logger.warning("fraud_api_timeout", client_id=client_id)
            raise ExternalTimeoutException(service=SERVICE_NAME) from e
        except httpx.HTTPError as e:
            logger.error("fraud_api_error", client_id=client_id, error=str(e))
            raise ExternalAPIException(
                message=f"Fraud API request failed: {e}",
                service=SERVICE_NAME,
            ) from e

        if response.status_code >= 400:
            logger.error(
                "fraud_api_error",
                client_id=client_id,
                status_code=response.status_code,
            )
            raise ExternalAPIException(
                message=f"Fraud API error: {response.text[:200]}",
                service=SERVICE_NAME,
                status_code=response.status_code,
            )

        try:
            data = response.json()
            return bool(data.get("fraudulent", False))
        except (ValueError, AttributeError) as e:
            logger.error("fraud_api_malformed_response", client_id=client_id)
            raise ExternalAPIException(
                message=f"Malformed fraud API response: {e}",
                service=SERVICE_NAME,
            ) from e
