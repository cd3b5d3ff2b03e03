"""Credit-analysis Pydantic schemas."""

from datetime import date
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from credit_sync.domain.entities import ClientTier, TransactionType


class ClientSchema(BaseModel):
    """Client being evaluated."""

    id: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Unique identifier for the client",
        examples=["client_001"],
    )
    name: str = Field("", max_length=255, description="Display name")
    blocked: bool = Field(False, description="Administrative block flag")
    tier: ClientTier = Field(ClientTier.STANDARD, description="Client tier")

    @field_validator("id")
    @classmethod
    def validate_id(cls, v: str) -> str:
        """Ensure id is not just whitespace."""
        if not v.strip():
            raise ValueError("id cannot be empty or whitespace")
        return v.strip()


class TransactionSchema(BaseModel):
    """A single credit or debit."""

    type: TransactionType = Field(..., description="credit or debit")
    amount: float = Field(
        ...,
        ge=0,
        description="Non-negative magnitude; the sign is implied by type",
        examples=[1000.0],
    )
    date: date


class CreditAnalysisRequestSchema(BaseModel):
    """Schema for POST /v1/credit/analysis request body."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "client": {"id": "client_001", "name": "Ana", "tier": "vip"},
                    "transactions": [
                        {"type": "credit", "amount": 1000.0, "date": "2024-05-10"},
                        {"type": "debit", "amount": 200.0, "date": "2024-05-12"},
                    ],
                    "analysis_date": "2024-06-01",
                }
            ]
        }
    )

    client: ClientSchema
    transactions: List[TransactionSchema] = Field(default_factory=list)
    analysis_date: date = Field(
        ...,
        description="Date the three-month cash-flow window ends at",
    )


class LoanResultSchema(BaseModel):
    """Schema for POST /v1/credit/analysis response body."""

    approved: bool = Field(..., description="Whether credit was approved")
    message: str = Field(
        ...,
        description="Reason for the outcome",
        examples=["Approved", "Score too low"],
    )
    limit: float = Field(
        ...,
        ge=0,
        description="Approved credit limit (0 when rejected)",
        examples=[1160.0],
    )
