"""
Unit Tests for CreditAnalyzer.

These tests verify:
1. Input preconditions
2. Score threshold rejection
3. Blocked / fraud rejection and the order of checks
4. Tier limits on approval
"""

import pytest
from structlog.testing import capture_logs

from credit_sync.application.services import CreditAnalyzer
from credit_sync.domain.entities import ClientTier, LoanResult, TransactionType
from credit_sync.domain.exceptions import InvalidArgumentException
from credit_sync.service.credit import CreditSettings
from tests.conftest import (
    ANALYSIS_DATE,
    FakeFraudClient,
    make_client,
    make_transaction,
)


def healthy_history(income: float = 1000.0, expenses: float = 200.0) -> list:
    return [
        make_transaction(10, income, TransactionType.CREDIT),
        make_transaction(5, expenses, TransactionType.DEBIT),
    ]


class TestPreconditions:
    """Missing inputs fail before any computation."""

    @pytest.mark.asyncio
    async def test_missing_client(self, fraud_client):
        analyzer = CreditAnalyzer(fraud_client)
        with pytest.raises(InvalidArgumentException):
            await analyzer.analyze_client(None, [], ANALYSIS_DATE)

    @pytest.mark.asyncio
    async def test_missing_transactions(self, fraud_client):
        analyzer = CreditAnalyzer(fraud_client)
        with pytest.raises(InvalidArgumentException):
            await analyzer.analyze_client(make_client(), None, ANALYSIS_DATE)

    @pytest.mark.asyncio
    async def test_missing_date(self, fraud_client):
        analyzer = CreditAnalyzer(fraud_client)
        with pytest.raises(InvalidArgumentException):
            await analyzer.analyze_client(make_client(), [], None)

        assert fraud_client.checked == []


class TestRejections:
    """Rejections are normal results with a zero limit."""

    @pytest.mark.asyncio
    async def test_score_too_low(self, fraud_client):
        analyzer = CreditAnalyzer(fraud_client)
        result = await analyzer.analyze_client(
            make_client(ClientTier.VIP),
            healthy_history(income=300.0, expenses=100.0),
            ANALYSIS_DATE,
        )

        assert result == LoanResult(approved=False, message="Score too low", limit=0.0)

    @pytest.mark.asyncio
    async def test_empty_history_scores_zero(self, fraud_client):
        analyzer = CreditAnalyzer(fraud_client)
        result = await analyzer.analyze_client(make_client(), [], ANALYSIS_DATE)

        assert not result.approved
        assert result.message == "Score too low"

    @pytest.mark.asyncio
    async def test_score_checked_before_fraud(self, fraud_client):
        """A low score rejects without consulting the fraud service."""
        analyzer = CreditAnalyzer(fraud_client)
        await analyzer.analyze_client(make_client(blocked=True), [], ANALYSIS_DATE)

        assert fraud_client.checked == []

    @pytest.mark.asyncio
    async def test_threshold_is_inclusive_for_approval(self, fraud_client):
        """A score of exactly 300 is not 'too low'."""
        analyzer = CreditAnalyzer(fraud_client)
        result = await analyzer.analyze_client(
            make_client(ClientTier.STANDARD),
            healthy_history(income=300.0, expenses=0.0),
            ANALYSIS_DATE,
        )

        assert result.approved
        assert result.limit == pytest.approx(150.0)

    @pytest.mark.asyncio
    async def test_blocked_client(self, fraud_client):
        analyzer = CreditAnalyzer(fraud_client)
        result = await analyzer.analyze_client(
            make_client(ClientTier.VIP, blocked=True),
            healthy_history(income=10_000.0),
            ANALYSIS_DATE,
        )

        assert result.approved is False
        assert result.message == "Client is blocked or fraudulent"
        assert result.limit == 0.0
        # Blocked short-circuits the fraud call
        assert fraud_client.checked == []

    @pytest.mark.asyncio
    async def test_fraudulent_client(self):
        fraud_client = FakeFraudClient(flagged={"client_001"})
        analyzer = CreditAnalyzer(fraud_client)
        result = await analyzer.analyze_client(
            make_client(ClientTier.VIP),
            healthy_history(income=10_000.0),
            ANALYSIS_DATE,
        )

        assert result.approved is False
        assert result.message == "Client is blocked or fraudulent"
        assert fraud_client.checked == ["client_001"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("tier", list(ClientTier))
    @pytest.mark.parametrize("income", [1_000.0, 50_000.0, 1_000_000.0])
    async def test_never_approves_flagged_clients(self, tier, income):
        fraud_client = FakeFraudClient(flagged={"client_001"})
        analyzer = CreditAnalyzer(fraud_client)

        for client in (make_client(tier, blocked=True), make_client(tier)):
            result = await analyzer.analyze_client(
                client, healthy_history(income=income), ANALYSIS_DATE
            )
            assert result.approved is False

    @pytest.mark.asyncio
    async def test_threshold_not_lowered_by_environment(self, fraud_client, monkeypatch):
        monkeypatch.setenv("CREDIT_MIN_APPROVAL_SCORE", "100")
        analyzer = CreditAnalyzer(fraud_client, settings=CreditSettings())
        history = [make_transaction(10, 200.0, TransactionType.CREDIT)]

        result = await analyzer.analyze_client(make_client(), history, ANALYSIS_DATE)

        assert result == LoanResult.reject("Score too low")


class TestApprovals:
    """Approved clients receive their tier limit."""

    @pytest.mark.asyncio
    async def test_vip_scenario(self, fraud_client):
        """CREDIT 1000, DEBIT 200 -> score 960 -> limit 960 + 1000 * 0.2."""
        analyzer = CreditAnalyzer(fraud_client)
        result = await analyzer.analyze_client(
            make_client(ClientTier.VIP),
            healthy_history(income=1000.0, expenses=200.0),
            ANALYSIS_DATE,
        )

        assert result.approved is True
        assert result.message == "Approved"
        assert result.limit == pytest.approx(1160.0)
        assert fraud_client.checked == ["client_001"]

    @pytest.mark.asyncio
    async def test_standard_limit(self, fraud_client):
        analyzer = CreditAnalyzer(fraud_client)
        result = await analyzer.analyze_client(
            make_client(ClientTier.STANDARD),
            healthy_history(income=600.0, expenses=200.0),
            ANALYSIS_DATE,
        )

        assert result.approved
        assert result.limit == pytest.approx(200.0)

    @pytest.mark.asyncio
    async def test_premium_limit(self, fraud_client):
        # score = (1000 - 200) * 1.1 = 880; limit = 880 * 0.75 + 1000 * 0.1
        analyzer = CreditAnalyzer(fraud_client)
        result = await analyzer.analyze_client(
            make_client(ClientTier.PREMIUM),
            healthy_history(income=1000.0, expenses=200.0),
            ANALYSIS_DATE,
        )

        assert result.approved
        assert result.limit == pytest.approx(760.0)

    @pytest.mark.asyncio
    async def test_transactions_outside_window_do_not_count(self, fraud_client):
        analyzer = CreditAnalyzer(fraud_client)
        history = [
            make_transaction(200, 50_000.0, TransactionType.CREDIT),
            make_transaction(10, 100.0, TransactionType.CREDIT),
        ]
        result = await analyzer.analyze_client(make_client(), history, ANALYSIS_DATE)

        assert result.message == "Score too low"

    @pytest.mark.asyncio
    async def test_custom_threshold(self, fraud_client):
        analyzer = CreditAnalyzer(
            fraud_client, settings=CreditSettings(min_approval_score=1000.0)
        )
        result = await analyzer.analyze_client(
            make_client(ClientTier.VIP), healthy_history(), ANALYSIS_DATE
        )

        assert result.message == "Score too low"

    @pytest.mark.asyncio
    async def test_logs_decision(self, fraud_client):
        analyzer = CreditAnalyzer(fraud_client)
        with capture_logs() as logs:
            await analyzer.analyze_client(
                make_client(ClientTier.VIP), healthy_history(), ANALYSIS_DATE
            )

        events = [entry for entry in logs if entry["event"] == "credit_analysis_completed"]
        assert len(events) == 1
        assert events[0]["approved"] is True
        assert events[0]["client_id"] == "client_001"
