"""Domain Exceptions - Business rule violations and domain errors."""

from .base import DomainException, InvalidArgumentException
from .order import (
    OrderNotFoundException,
    OrderValidationException,
    PersistenceException,
)
from .external import (
    ExternalAPIException,
    ExternalTimeoutException,
)

__all__ = [
    "DomainException",
    "InvalidArgumentException",
    "OrderNotFoundException",
    "OrderValidationException",
    "PersistenceException",
    "ExternalAPIException",
    "ExternalTimeoutException",
]
