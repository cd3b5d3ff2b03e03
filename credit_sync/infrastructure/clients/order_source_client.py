"""HTTP implementation of OrderSourceClient."""

import asyncio
from typing import Any, Awaitable, Callable, Dict, List, TypeVar

import httpx
import structlog

from credit_sync.core.config import settings
from credit_sync.core.metrics import (
    record_order_fetch_failure,
    track_order_fetch_latency,
)
from credit_sync.domain.entities import Order, OrderItem, OrderStatus
from credit_sync.domain.exceptions import (
    ExternalAPIException,
    ExternalTimeoutException,
    InvalidArgumentException,
)
from credit_sync.domain.interfaces import OrderSourceClient

logger = structlog.get_logger(__name__)

T = TypeVar("T")

SERVICE_NAME = "order_api"


class HttpOrderSourceClient(OrderSourceClient):
    """
    HTTP client for the external order API.

    Timeouts are retried with exponential backoff; once retries are
    exhausted an ExternalTimeoutException is raised.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        max_retries: int | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._base_url = (base_url or settings.order_api_url).rstrip("/")
        self._timeout = timeout or settings.order_api_timeout
        self._max_retries = max_retries or settings.order_api_max_retries
        self._transport = transport

    async def fetch_pending(self) -> List[Order]:
        """Fetch all pending orders."""

        async def call(client: httpx.AsyncClient) -> List[Order]:
            response = await client.get(
                "/orders", params={"status": OrderStatus.PENDING.value}
            )
            self._raise_for_status(response)
            data = response.json()
            if not isinstance(data, dict) or not isinstance(data.get("orders", []), list):
                raise TypeError("expected an object with an 'orders' list")
            return [self._parse_order(item) for item in data.get("orders", [])]

        with track_order_fetch_latency():
            orders = await self._with_retries("fetch_pending", call)

        logger.info("pending_orders_fetched", count=len(orders))
        return orders

    async def get_by_id(self, order_id: str) -> Order:
        """Fetch a single order."""
        if not order_id:
            raise InvalidArgumentException("Order ID cannot be null or empty")

        async def call(client: httpx.AsyncClient) -> Order:
            response = await client.get(f"/orders/{order_id}")
            self._raise_for_status(response)
            return self._parse_order(response.json())

        return await self._with_retries("get_by_id", call)

    async def update_status(self, order_id: str, status: OrderStatus) -> None:
        """Report a status change to the order API."""
        if not order_id:
            raise InvalidArgumentException("Order ID cannot be null or empty")
        if status is None:
            raise InvalidArgumentException("Status cannot be null")

        async def call(client: httpx.AsyncClient) -> None:
            response = await client.patch(
                f"/orders/{order_id}",
                json={"status": OrderStatus(status).value},
            )
            self._raise_for_status(response)

        await self._with_retries("update_status", call)

    async def _with_retries(
        self,
        operation: str,
        call: Callable[[httpx.AsyncClient], Awaitable[T]],
    ) -> T:
        for attempt in range(self._max_retries):
            try:
                async with httpx.AsyncClient(
                    base_url=self._base_url,
                    timeout=self._timeout,
                    transport=self._transport,
                ) as client:
                    return await call(client)

            except httpx.TimeoutException:
                record_order_fetch_failure("timeout")
                logger.warning(
                    "order_api_timeout",
                    operation=operation,
                    attempt=attempt + 1,
                    max_retries=self._max_retries,
                )
            except httpx.HTTPError as e:
                record_order_fetch_failure("error")
                raise ExternalAPIException(
                    message=f"Order API request failed: {e}",
                    service=SERVICE_NAME,
                ) from e
            except (KeyError, TypeError, ValueError) as e:
                record_order_fetch_failure("malformed")
                raise ExternalAPIException(
                    message=f"Malformed order API response: {e}",
                    service=SERVICE_NAME,
                ) from e

            # Exponential backoff
            if attempt < self._max_retries - 1:
                await asyncio.sleep(2**attempt * 0.1)

        raise ExternalTimeoutException(service=SERVICE_NAME)

    @staticmethod
    def _raise_for_status(response: httpx.Response) -> None:
        if response.status_code >= 400:
            record_order_fetch_failure("error")
            raise ExternalAPIException(
                message=f"Order API error: {response.text[:200]}",
                service=SERVICE_NAME,
                status_code=response.status_code,
            )

    @staticmethod
    def _parse_order(data: Dict[str, Any]) -> Order:
        """Parse a raw API order into an Order entity."""
        if not isinstance(data, dict):
            raise TypeError(f"order must be an object, got {type(data).__name__}")
        raw_items = data.get("items") or []
        if not isinstance(raw_items, list) or not all(
            isinstance(item, dict) for item in raw_items
        ):
            raise TypeError("order items must be a list of objects")

        items = [
            OrderItem(
                id=str(item.get("id", "")),
                name=item.get("name", ""),
                price=float(item.get("price", 0.0)),
                quantity=int(item.get("quantity", 0)),
                description=item.get("description") or "",
            )
            for item in raw_items
        ]

        status_str = str(data.get("status", OrderStatus.PENDING.value)).lower()

        return Order(
            id=str(data.get("id", "")),
            customer_id=data.get("customer_id"),
            status=OrderStatus(status_str),
            items=items,
        )
