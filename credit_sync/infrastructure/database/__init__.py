"""Database infrastructure."""

from .connection import DatabaseSessionManager, db_manager, get_session_factory
from .models import Base, OrderModel, OrderItemModel

__all__ = [
    "DatabaseSessionManager",
    "db_manager",
    "get_session_factory",
    "Base",
    "OrderModel",
    "OrderItemModel",
]
