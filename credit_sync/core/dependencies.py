"""Dependency injection for FastAPI."""

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from credit_sync.application.services import CreditAnalyzer, OrderSyncJob
from credit_sync.infrastructure.cache import DedupCache
from credit_sync.infrastructure.clients import (
    HttpFraudCheckClient,
    HttpOrderSourceClient,
)
from credit_sync.infrastructure.database import get_session_factory
from credit_sync.infrastructure.repositories import SqlAlchemyOrderRepository


# Repository dependencies
def get_order_repository(
    session_factory: Annotated[
        async_sessionmaker[AsyncSession], Depends(get_session_factory)
    ],
) -> SqlAlchemyOrderRepository:
    """Get an OrderRepository instance."""
    return SqlAlchemyOrderRepository(session_factory)


# External client dependencies
def get_order_source() -> HttpOrderSourceClient:
    """Get an OrderSourceClient instance."""
    return HttpOrderSourceClient()


def get_fraud_client() -> HttpFraudCheckClient:
    """Get a FraudCheckClient instance."""
    return HttpFraudCheckClient()


def get_dedup_cache(request: Request) -> DedupCache:
    """Get the application-owned dedup cache."""
    return request.app.state.dedup_cache


# Service dependencies
def get_credit_analyzer(
    fraud_client: Annotated[HttpFraudCheckClient, Depends(get_fraud_client)],
) -> CreditAnalyzer:
    """Get a CreditAnalyzer instance."""
    return CreditAnalyzer(fraud_client=fraud_client)


def get_order_sync_job(
    order_source: Annotated[HttpOrderSourceClient, Depends(get_order_source)],
    order_repo: Annotated[SqlAlchemyOrderRepository, Depends(get_order_repository)],
    cache: Annotated[DedupCache, Depends(get_dedup_cache)],
) -> OrderSyncJob:
    """Get an OrderSyncJob instance with all dependencies."""
    return OrderSyncJob(
        order_source=order_source,
        order_repository=order_repo,
        cache=cache,
    )
