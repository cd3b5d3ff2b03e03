"""
Fixtures for integration tests.

Provides:
- In-memory database and session factory for testing
- Test client for the FastAPI app with fake upstream services
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from credit_sync.core.dependencies import (
    get_dedup_cache,
    get_fraud_client,
    get_order_repository,
    get_order_source,
)
from credit_sync.infrastructure.cache import DedupCache
from credit_sync.infrastructure.database import Base
from credit_sync.infrastructure.repositories import SqlAlchemyOrderRepository
from credit_sync.main import app
from tests.conftest import FakeFraudClient, FakeOrderSource


# =============================================================================
# Database Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def test_engine():
    """Create an in-memory SQLite async engine for testing."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(test_engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest.fixture
def order_repository(session_factory) -> SqlAlchemyOrderRepository:
    return SqlAlchemyOrderRepository(session_factory)


# =============================================================================
# Upstream Fakes
# =============================================================================

@pytest.fixture
def order_source() -> FakeOrderSource:
    return FakeOrderSource()


@pytest.fixture
def app_cache() -> DedupCache:
    return DedupCache()


# =============================================================================
# App Client Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def client(
    order_repository: SqlAlchemyOrderRepository,
    order_source: FakeOrderSource,
    fraud_client: FakeFraudClient,
    app_cache: DedupCache,
) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client with mocked dependencies.

    This client:
    - Stores orders in an in-memory SQLite database
    - Reads pending orders from a fake order source
    - Checks fraud against a fake fraud client
    - Uses a fresh dedup cache
    """
    app.dependency_overrides[get_order_repository] = lambda: order_repository
    app.dependency_overrides[get_order_source] = lambda: order_source
    app.dependency_overrides[get_fraud_client] = lambda: fraud_client
    app.dependency_overrides[get_dedup_cache] = lambda: app_cache

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
