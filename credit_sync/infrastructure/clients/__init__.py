"""External API client implementations."""

from .order_source_client import HttpOrderSourceClient
from .fraud_client import HttpFraudCheckClient

__all__ = [
    "HttpOrderSourceClient",
    "HttpFraudCheckClient",
]
