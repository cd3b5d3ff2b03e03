"""Application services (use cases)."""

from .credit_analyzer import CreditAnalyzer
from .order_sync_job import OrderSyncJob
from .sync_scheduler import OrderSyncScheduler

__all__ = [
    "CreditAnalyzer",
    "OrderSyncJob",
    "OrderSyncScheduler",
]
