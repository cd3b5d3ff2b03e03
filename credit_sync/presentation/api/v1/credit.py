"""Credit analysis API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from credit_sync.application.services import CreditAnalyzer
from credit_sync.core.config import settings
from credit_sync.core.dependencies import get_credit_analyzer
from credit_sync.core.metrics import record_credit_decision
from credit_sync.domain.entities import Client, Transaction
from credit_sync.presentation.schemas import (
    CreditAnalysisRequestSchema,
    ErrorResponseSchema,
    LoanResultSchema,
)

credit_router = APIRouter(
    prefix="/v1/credit",
    responses={
        400: {"model": ErrorResponseSchema, "description": "Invalid request"},
        503: {"model": ErrorResponseSchema, "description": "Fraud service unavailable"},
    },
)


@credit_router.post(
    "/analysis",
    response_model=LoanResultSchema,
    status_code=200,
    summary="Analyze Client Credit",
    description="""Decide whether a client qualifies for credit and at what limit""",
)
async def analyze_client(
    request: CreditAnalysisRequestSchema,
    analyzer: Annotated[CreditAnalyzer, Depends(get_credit_analyzer)],
) -> LoanResultSchema:
    """
    Run a credit analysis.

    A rejection is returned with 200 and ``approved`` set to false.
    """
    client = Client(
        id=request.client.id,
        name=request.client.name,
        blocked=request.client.blocked,
        tier=request.client.tier,
    )
    transactions = [
        Transaction(type=t.type, amount=t.amount, date=t.date)
        for t in request.transactions
    ]

    result = await analyzer.analyze_client(client, transactions, request.analysis_date)

    if settings.metrics_enabled:
        record_credit_decision(result.approved, client.tier.value, result.limit)

    return LoanResultSchema(**result.to_dict())
