"""In-memory implementation of OrderRepository."""

from typing import Dict

from credit_sync.domain.entities import Order, OrderStatus
from credit_sync.domain.exceptions import (
    OrderNotFoundException,
    PersistenceException,
)
from credit_sync.domain.interfaces import OrderRepository


class InMemoryOrderRepository(OrderRepository):
    """
    Dict-backed order store for development and tests.

    Stores the order objects themselves, so ``update_status`` is visible
    through any reference the caller still holds.
    """

    def __init__(self):
        self._orders: Dict[str, Order] = {}

    async def save(self, order: Order) -> Order:
        if order is None:
            raise PersistenceException("Cannot save null order")
        if not order.id:
            raise PersistenceException("Order ID cannot be null or empty")
        if order.id in self._orders:
            raise PersistenceException(f"Order already exists: {order.id}")

        self._orders[order.id] = order
        return order

    async def get_by_id(self, order_id: str) -> Order:
        if not order_id:
            raise PersistenceException("Order ID cannot be null or empty")

        order = self._orders.get(order_id)
        if order is None:
            raise OrderNotFoundException(order_id)
        return order

    async def update_status(self, order_id: str, status: OrderStatus) -> None:
        if status is None:
            raise PersistenceException("Status cannot be null")

        order = await self.get_by_id(order_id)
        order.status = status

    async def delete(self, order_id: str) -> None:
        await self.get_by_id(order_id)
        del self._orders[order_id]

    def __len__(self) -> int:
        return len(self._orders)

    def __contains__(self, order_id: object) -> bool:
        return order_id in self._orders
