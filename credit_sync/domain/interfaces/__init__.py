"""
Domain Interfaces (Ports)
"""

from .repositories import OrderRepository
from .clients import FraudCheckClient, OrderSourceClient

__all__ = [
    "OrderRepository",
    "FraudCheckClient",
    "OrderSourceClient",
]
