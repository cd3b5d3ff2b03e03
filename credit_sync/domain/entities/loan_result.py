"""LoanResult value produced by one credit analysis."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LoanResult:
    """
    Outcome of a credit analysis.

    A rejection is a normal result, not an error. ``limit`` is only
    meaningful when ``approved`` is True and is 0.0 otherwise.
    """

    approved: bool
    message: str
    limit: float = 0.0

    @classmethod
    def approve(cls, limit: float) -> "LoanResult":
        return cls(approved=True, message="Approved", limit=limit)

    @classmethod
    def reject(cls, message: str) -> "LoanResult":
        return cls(approved=False, message=message, limit=0.0)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "approved": self.approved,
            "message": self.message,
            "limit": round(self.limit, 2),
        }
