"""Repository implementations."""

from .order_repository import SqlAlchemyOrderRepository
from .memory_order_repository import InMemoryOrderRepository

__all__ = [
    "SqlAlchemyOrderRepository",
    "InMemoryOrderRepository",
]
