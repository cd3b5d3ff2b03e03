"""Repository interfaces for data persistence."""

from abc import ABC, abstractmethod

from credit_sync.domain.entities import Order, OrderStatus


class OrderRepository(ABC):
    """
    Abstract repository for Order persistence.

    Implementations may use PostgreSQL, in-memory storage, etc.
    """

    @abstractmethod
    async def save(self, order: Order) -> Order:
        """
        Persist a new order with its items.

        Args:
            order: The order to save

        Returns:
            The saved order

        Raises:
            PersistenceException: If the id is empty or already stored,
                or the backend fails
        """
        ...

    @abstractmethod
    async def get_by_id(self, order_id: str) -> Order:
        """
        Retrieve an order by ID.

        Raises:
            OrderNotFoundException: If the order does not exist
        """
        ...

    @abstractmethod
    async def update_status(self, order_id: str, status: OrderStatus) -> None:
        """
        Update the status of a stored order.

        Raises:
            OrderNotFoundException: If the order does not exist
        """
        ...

    @abstractmethod
    async def delete(self, order_id: str) -> None:
        """
        Delete a stored order.

        Raises:
            OrderNotFoundException: If the order does not exist
        """
        ...
