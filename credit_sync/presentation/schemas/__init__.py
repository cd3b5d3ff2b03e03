"""Pydantic schemas for API request/response validation."""

from .credit import (
    ClientSchema,
    CreditAnalysisRequestSchema,
    LoanResultSchema,
    TransactionSchema,
)
from .order import (
    OrderItemSchema,
    OrderProcessResponseSchema,
    OrderSchema,
    OrderValidationResponseSchema,
    SyncReportSchema,
)
from .error import ErrorResponseSchema

__all__ = [
    "ClientSchema",
    "CreditAnalysisRequestSchema",
    "LoanResultSchema",
    "TransactionSchema",
    "OrderItemSchema",
    "OrderProcessResponseSchema",
    "OrderSchema",
    "OrderValidationResponseSchema",
    "SyncReportSchema",
    "ErrorResponseSchema",
]
