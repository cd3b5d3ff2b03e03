"""
Shared fixtures and fake collaborators.

Provides:
- Order/transaction builders
- Fake order source, fraud client and recording order repository
- A fresh DedupCache per test
"""

from datetime import date, timedelta
from typing import Iterable, List, Optional

import pytest

from credit_sync.domain.entities import (
    Client,
    ClientTier,
    Order,
    OrderItem,
    OrderStatus,
    Transaction,
    TransactionType,
)
from credit_sync.domain.exceptions import (
    ExternalTimeoutException,
    PersistenceException,
)
from credit_sync.domain.interfaces import FraudCheckClient, OrderSourceClient
from credit_sync.infrastructure.cache import DedupCache
from credit_sync.infrastructure.repositories import InMemoryOrderRepository


ANALYSIS_DATE = date(2024, 6, 15)


# =============================================================================
# Builders
# =============================================================================

def make_transaction(
    days_ago: int,
    amount: float,
    txn_type: TransactionType = TransactionType.CREDIT,
    reference: date = ANALYSIS_DATE,
) -> Transaction:
    """Helper to create transactions relative to the analysis date."""
    return Transaction(
        type=txn_type,
        amount=amount,
        date=reference - timedelta(days=days_ago),
    )


def make_client(
    tier: ClientTier = ClientTier.STANDARD,
    blocked: bool = False,
    client_id: str = "client_001",
) -> Client:
    return Client(id=client_id, name="Test Client", blocked=blocked, tier=tier)


def make_order(
    order_id: str = "ORD001",
    customer_id: Optional[str] = "CUST001",
    price: float = 10.0,
    quantity: int = 1,
    status: OrderStatus = OrderStatus.PENDING,
) -> Order:
    """Order with a single item of the given price and quantity."""
    return Order(
        id=order_id,
        customer_id=customer_id,
        status=status,
        items=[OrderItem(id=f"{order_id}-1", name="Widget", price=price, quantity=quantity)],
    )


# =============================================================================
# Fake Collaborators
# =============================================================================

class FakeOrderSource(OrderSourceClient):
    """Order source returning a fixed batch, or timing out."""

    def __init__(self, orders: Iterable[Order] = (), timeout: bool = False):
        self.orders = list(orders)
        self.timeout = timeout
        self.fetch_count = 0
        self.status_updates: List[tuple] = []

    async def fetch_pending(self) -> List[Order]:
        self.fetch_count += 1
        if self.timeout:
            raise ExternalTimeoutException(service="order_api")
        return list(self.orders)

    async def get_by_id(self, order_id: str) -> Order:
        if self.timeout:
            raise ExternalTimeoutException(service="order_api")
        for order in self.orders:
            if order.id == order_id:
                return order
        raise KeyError(order_id)

    async def update_status(self, order_id: str, status: OrderStatus) -> None:
        if self.timeout:
            raise ExternalTimeoutException(service="order_api")
        self.status_updates.append((order_id, status))


class FakeFraudClient(FraudCheckClient):
    """Fraud client flagging a fixed set of client ids."""

    def __init__(self, flagged: Iterable[str] = ()):
        self.flagged = set(flagged)
        self.checked: List[str] = []

    async def is_fraudulent(self, client_id: str) -> bool:
        self.checked.append(client_id)
        return client_id in self.flagged


class RecordingOrderRepository(InMemoryOrderRepository):
    """In-memory repository that records saves and can fail chosen ids."""

    def __init__(self, fail_ids: Iterable[str] = ()):
        super().__init__()
        self.fail_ids = set(fail_ids)
        self.save_calls: List[str] = []

    async def save(self, order: Order) -> Order:
        self.save_calls.append(order.id)
        if order.id in self.fail_ids:
            raise PersistenceException(f"Simulated failure for {order.id}")
        return await super().save(order)


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def cache() -> DedupCache:
    return DedupCache()


@pytest.fixture
def repository() -> RecordingOrderRepository:
    return RecordingOrderRepository()


@pytest.fixture
def fraud_client() -> FakeFraudClient:
    return FakeFraudClient()
