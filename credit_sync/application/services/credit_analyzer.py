"""Credit analyzer - orchestrates the credit decision use case."""

from datetime import date
from typing import Iterable, Optional

import structlog

from credit_sync.domain.entities import Client, LoanResult, Transaction
from credit_sync.domain.exceptions import InvalidArgumentException
from credit_sync.domain.interfaces import FraudCheckClient
from credit_sync.service.credit import (
    CreditSettings,
    aggregate_cash_flow,
    calculate_score,
    credit_settings,
    get_limit_strategy,
)

logger = structlog.get_logger(__name__)

SCORE_TOO_LOW = "Score too low"
BLOCKED_OR_FRAUDULENT = "Client is blocked or fraudulent"


class CreditAnalyzer:
    """
    Decides whether a client qualifies for credit and at what limit.

    The first decisive condition wins:
    1. score below the approval threshold -> rejected
    2. client blocked or flagged by the fraud service -> rejected
    3. otherwise approved with the tier's limit
    """

    def __init__(
        self,
        fraud_client: FraudCheckClient,
        settings: CreditSettings = credit_settings,
        log=None,
    ):
        self._fraud_client = fraud_client
        self._settings = settings
        self._log = log or logger

    async def analyze_client(
        self,
        client: Optional[Client],
        transactions: Optional[Iterable[Transaction]],
        analysis_date: Optional[date],
    ) -> LoanResult:
        """
        Evaluate a client's creditworthiness.

        Args:
            client: The client being evaluated
            transactions: The client's transaction history
            analysis_date: Date the trailing cash-flow window ends at

        Returns:
            LoanResult; a rejection is a normal result

        Raises:
            InvalidArgumentException: If any input is missing
        """
        if client is None or transactions is None or analysis_date is None:
            raise InvalidArgumentException("Invalid input")

        cash_flow = aggregate_cash_flow(
            transactions,
            analysis_date,
            window_months=self._settings.cash_flow_window_months,
        )
        score = calculate_score(
            client.tier,
            cash_flow.income,
            cash_flow.expenses,
            settings=self._settings,
        )

        log = self._log.bind(
            client_id=client.id,
            tier=client.tier.value,
            income=cash_flow.income,
            expenses=cash_flow.expenses,
            score=round(score, 2),
        )

        if score < self._settings.min_approval_score:
            result = LoanResult.reject(SCORE_TOO_LOW)
        elif client.blocked or await self._fraud_client.is_fraudulent(client.id):
            result = LoanResult.reject(BLOCKED_OR_FRAUDULENT)
        else:
            strategy = get_limit_strategy(client.tier)
            result = LoanResult.approve(
                strategy.calculate_limit(cash_flow.income, score)
            )

        log.info(
            "credit_analysis_completed",
            approved=result.approved,
            reason=result.message,
            limit=result.limit,
        )

        return result
