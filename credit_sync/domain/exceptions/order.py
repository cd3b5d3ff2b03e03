"""Order-related domain exceptions."""

from .base import DomainException


class OrderValidationException(DomainException):
    """Raised when an order violates a domain rule."""

    def __init__(self, message: str, order_id: str | None = None):
        super().__init__(
            message=message,
            code="ORDER_VALIDATION_ERROR",
        )
        self.order_id = order_id


class PersistenceException(DomainException):
    """Raised when the order store fails to persist or load an order."""

    def __init__(self, message: str, code: str = "PERSISTENCE_ERROR"):
        super().__init__(message=message, code=code)


class OrderNotFoundException(PersistenceException):
    """Raised when an order does not exist in the store."""

    def __init__(self, order_id: str):
        super().__init__(
            message=f"Order not found: {order_id}",
            code="ORDER_NOT_FOUND",
        )
        self.order_id = order_id
