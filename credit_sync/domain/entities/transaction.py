"""Transaction entity representing a client cash movement."""

from dataclasses import dataclass
from datetime import date
from enum import Enum


class TransactionType(str, Enum):
    """Type of transaction."""

    CREDIT = "credit"  # Money in
    DEBIT = "debit"  # Money out


@dataclass(frozen=True)
class Transaction:
    """
    Immutable representation of a client transaction.

    Attributes:
        type: Whether this is a credit or debit
        amount: Non-negative magnitude; the sign is implied by type
        date: Date of the transaction
    """

    type: TransactionType
    amount: float
    date: date

    @property
    def is_credit(self) -> bool:
        """Check if this is a credit transaction."""
        return self.type == TransactionType.CREDIT

    @property
    def is_debit(self) -> bool:
        """Check if this is a debit transaction."""
        return self.type == TransactionType.DEBIT
