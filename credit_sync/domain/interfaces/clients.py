"""External client interfaces."""

from abc import ABC, abstractmethod
from typing import List

from credit_sync.domain.entities import Order, OrderStatus


class OrderSourceClient(ABC):
    """
    Abstract client for the external order source.

    Provides the pending orders the sync job ingests.
    """

    @abstractmethod
    async def fetch_pending(self) -> List[Order]:
        """
        Fetch all orders currently pending on the external source.

        Returns:
            List of pending orders

        Raises:
            ExternalTimeoutException: If the request times out
            ExternalAPIException: If the API returns an error
        """
        ...

    @abstractmethod
    async def get_by_id(self, order_id: str) -> Order:
        """
        Fetch a single order from the external source.

        Raises:
            ExternalTimeoutException: If the request times out
        """
        ...

    @abstractmethod
    async def update_status(self, order_id: str, status: OrderStatus) -> None:
        """
        Report a new order status back to the external source.

        Raises:
            ExternalTimeoutException: If the request times out
        """
        ...


class FraudCheckClient(ABC):
    """
    Abstract client for the fraud-check service.

    Its answer is treated as authoritative by the credit analyzer.
    """

    @abstractmethod
    async def is_fraudulent(self, client_id: str) -> bool:
        """
        Check whether a client is flagged as fraudulent.

        Args:
            client_id: The client's identifier

        Returns:
            True if the client is flagged
        """
        ...
