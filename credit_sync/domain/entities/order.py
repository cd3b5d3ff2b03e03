"""Order aggregate and its line items."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Tuple


class OrderStatus(str, Enum):
    """Lifecycle status of an order."""

    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    ERROR = "error"
    PENDING_APPROVAL = "pending_approval"
    APPROVED = "approved"
    REJECTED = "rejected"


@dataclass(frozen=True)
class OrderItem:
    """
    A single line of an order.

    Price and quantity are checked by order validation, not here.
    """

    id: str
    name: str
    price: float
    quantity: int
    description: str = ""

    @property
    def total_price(self) -> float:
        return self.price * self.quantity

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "price": self.price,
            "quantity": self.quantity,
            "description": self.description,
        }


class Order:
    """
    An order with a derived total.

    Items are only reachable as a tuple; every mutator recomputes
    ``total`` before returning.
    """

    def __init__(
        self,
        id: str,
        customer_id: Optional[str],
        status: OrderStatus = OrderStatus.PENDING,
        items: Optional[Iterable[OrderItem]] = None,
    ):
        self.id = id
        self.customer_id = customer_id
        self.status = status
        self._items: list[OrderItem] = []
        self._total = 0.0
        self.set_items(items or [])

    @property
    def items(self) -> Tuple[OrderItem, ...]:
        return tuple(self._items)

    @property
    def total(self) -> float:
        return self._total

    def add_item(self, item: Optional[OrderItem]) -> None:
        """Append an item. ``None`` is ignored."""
        if item is None:
            return
        self._items.append(item)
        self._recalculate_total()

    def remove_item(self, item: OrderItem) -> bool:
        """Remove the first matching item. Returns False if it was absent."""
        try:
            self._items.remove(item)
        except ValueError:
            return False
        self._recalculate_total()
        return True

    def set_items(self, items: Iterable[OrderItem]) -> None:
        """Replace all items."""
        self._items = [item for item in items if item is not None]
        self._recalculate_total()

    def _recalculate_total(self) -> None:
        self._total = sum(item.total_price for item in self._items)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "customer_id": self.customer_id,
            "status": self.status.value,
            "total": round(self._total, 2),
            "items": [item.to_dict() for item in self._items],
        }

    def __repr__(self) -> str:
        return (
            f"Order(id={self.id!r}, customer_id={self.customer_id!r}, "
            f"status={self.status.value}, total={self._total}, "
            f"items={len(self._items)})"
        )
