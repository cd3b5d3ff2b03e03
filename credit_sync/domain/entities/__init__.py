"""Domain Entities - Core business objects."""

from .client import Client, ClientTier
from .loan_result import LoanResult
from .order import Order, OrderItem, OrderStatus
from .transaction import Transaction, TransactionType

__all__ = [
    "Client",
    "ClientTier",
    "LoanResult",
    "Order",
    "OrderItem",
    "OrderStatus",
    "Transaction",
    "TransactionType",
]
