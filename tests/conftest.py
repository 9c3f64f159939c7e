"""
Pytest configuration and fixtures for the stock returns estimator tests.

This module provides:
- In-memory SQLite database fixtures
- In-memory and failing series cache repositories
- Scripted, rate-limited and failing price series providers
- Time helpers for Eastern timezone
- Service and API client fixtures
"""

import asyncio
from datetime import date, datetime, timedelta
from typing import Callable, Optional, Union

import httpx
import pytest
from sqlalchemy import create_engine, StaticPool
from sqlalchemy.orm import sessionmaker, Session
from fastapi.testclient import TestClient

from returns_app.main import app
from returns_app.api.deps import get_price_provider
from returns_app.config.settings import Settings, set_settings, reset_settings
from returns_app.core.timezone import EASTERN_TZ
from returns_app.domain.models import CacheEntry
from returns_app.repositories.sqlalchemy.database import Base, get_db, reset_database
# Import ORM models to register them with Base before creating tables
from returns_app.repositories.sqlalchemy import orm_models  # noqa: F401
from returns_app.repositories.sqlalchemy import SqlAlchemySeriesCacheRepository
from returns_app.services import PriceResolver, ReturnsService, SeriesCache
from returns_app.services.series_parser import RATE_LIMIT_MARKER


# =============================================================================
# SAMPLE DATA
# =============================================================================


AAPL_CSV = (
    "Date,Open,High,Low,Close,Volume\n"
    "2025-01-08,146.00,149.00,145.50,147.25,900\n"
    "2025-01-10,148.00,151.00,147.50,150.00,1000\n"
    "2025-01-15,158.00,161.00,157.00,160.00,1200\n"
)

MSFT_CSV = (
    "Date,Open,High,Low,Close,Volume\n"
    "2025-01-02,400.00,405.00,398.00,402.00,500\n"
    "2025-01-17,420.00,425.00,418.00,420.00,700\n"
)

LATE_LISTING_CSV = (
    "Date,Open,High,Low,Close,Volume\n"
    "2025-01-14,20.00,21.00,19.50,20.50,300\n"
    "2025-01-15,20.50,22.00,20.00,21.00,350\n"
)


# =============================================================================
# TIMEZONE HELPERS
# =============================================================================


def eastern_datetime(
    year: int,
    month: int,
    day: int,
    hour: int = 10,
    minute: int = 0,
    second: int = 0,
) -> datetime:
    """Create a localized datetime in US/Eastern timezone."""
    return EASTERN_TZ.localize(datetime(year, month, day, hour, minute, second))


class FakeClock:
    """Settable clock for cache TTL tests."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now = self.now + timedelta(**kwargs)


@pytest.fixture
def fixed_now() -> datetime:
    """Fixed 'now' timestamp for deterministic tests."""
    return eastern_datetime(2025, 1, 20, 10, 0, 0)


@pytest.fixture
def clock(fixed_now) -> FakeClock:
    """Provide a settable clock starting at fixed_now."""
    return FakeClock(fixed_now)


@pytest.fixture
def fixed_today() -> date:
    """Fixed 'today' used for demo sell dates."""
    return date(2025, 1, 20)


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture(scope="function")
def test_engine():
    """Create test database engine with shared in-memory SQLite."""
    reset_settings()

    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def test_session(test_engine) -> Session:
    """Create test database session."""
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()


# =============================================================================
# REPOSITORY FIXTURES
# =============================================================================


class InMemorySeriesCacheRepository:
    """Dict-backed series cache repository."""

    def __init__(self):
        self.entries: dict[str, CacheEntry] = {}

    def get(self, cache_key: str) -> Optional[CacheEntry]:
        return self.entries.get(cache_key)

    def put(self, entry: CacheEntry) -> None:
        self.entries[entry.cache_key] = entry

    def delete(self, cache_key: str) -> None:
        self.entries.pop(cache_key, None)


class FailingSeriesCacheRepository:
    """Repository whose storage always fails (quota, locked file, ...)."""

    def get(self, cache_key: str) -> Optional[CacheEntry]:
        raise OSError("storage unavailable")

    def put(self, entry: CacheEntry) -> None:
        raise OSError("quota exceeded")

    def delete(self, cache_key: str) -> None:
        raise OSError("storage unavailable")


@pytest.fixture
def memory_repo() -> InMemorySeriesCacheRepository:
    """Provide an empty in-memory cache repository."""
    return InMemorySeriesCacheRepository()


@pytest.fixture
def sqlite_repo(test_session) -> SqlAlchemySeriesCacheRepository:
    """Provide test SeriesCacheRepository backed by SQLite."""
    return SqlAlchemySeriesCacheRepository(test_session)


@pytest.fixture
def series_cache(memory_repo, clock) -> SeriesCache:
    """Provide SeriesCache over the in-memory repository."""
    return SeriesCache(repo=memory_repo, clock=clock)


# =============================================================================
# PRICE SOURCE FIXTURES
# =============================================================================


Response = Union[str, Exception]


class ScriptedSeriesProvider:
    """
    Price source answering from a fixed symbol -> body (or exception) map.

    Unknown symbols get "No data". Per-symbol delays let tests control the
    completion order of concurrent fetches.
    """

    def __init__(
        self,
        responses: Optional[dict[str, Response]] = None,
        delays: Optional[dict[str, float]] = None,
        on_fetch: Optional[Callable[[str], None]] = None,
    ):
        self.responses = responses or {}
        self.delays = delays or {}
        self.on_fetch = on_fetch
        self.calls: list[str] = []
        self.completed: list[str] = []

    async def fetch_series(self, symbol: str) -> str:
        self.calls.append(symbol)
        delay = self.delays.get(symbol, 0)
        if delay:
            await asyncio.sleep(delay)
        if self.on_fetch is not None:
            self.on_fetch(symbol)
        self.completed.append(symbol)
        response = self.responses.get(symbol, "No data")
        if isinstance(response, Exception):
            raise response
        return response


class RateLimitedSeriesProvider(ScriptedSeriesProvider):
    """Price source that has exhausted its daily quota."""

    async def fetch_series(self, symbol: str) -> str:
        self.calls.append(symbol)
        return RATE_LIMIT_MARKER


class FailingSeriesProvider(ScriptedSeriesProvider):
    """Price source whose transport always fails."""

    async def fetch_series(self, symbol: str) -> str:
        self.calls.append(symbol)
        raise httpx.ConnectError("Network unavailable")


@pytest.fixture
def scripted_provider() -> ScriptedSeriesProvider:
    """Provide a provider that knows AAPL and MSFT."""
    return ScriptedSeriesProvider({"aapl.us": AAPL_CSV, "msft.us": MSFT_CSV})


@pytest.fixture
def rate_limited_provider() -> RateLimitedSeriesProvider:
    """Provide a provider that always answers with the rate-limit notice."""
    return RateLimitedSeriesProvider()


@pytest.fixture
def failing_provider() -> FailingSeriesProvider:
    """Provide a provider whose transport always fails."""
    return FailingSeriesProvider()


# =============================================================================
# SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def resolver_factory(series_cache) -> Callable[..., PriceResolver]:
    """Factory for resolvers over the shared in-memory series cache."""

    def _create(provider, cache: Optional[SeriesCache] = None) -> PriceResolver:
        return PriceResolver(provider=provider, cache=cache or series_cache)

    return _create


@pytest.fixture
def service_factory(resolver_factory, fixed_today) -> Callable[..., ReturnsService]:
    """Factory for returns services with a fixed 'today'."""

    def _create(provider, cache: Optional[SeriesCache] = None) -> ReturnsService:
        return ReturnsService(
            resolver=resolver_factory(provider, cache),
            today=lambda: fixed_today,
        )

    return _create


# =============================================================================
# API CLIENT
# =============================================================================


@pytest.fixture
def api_provider() -> ScriptedSeriesProvider:
    """Provider used by the API client; tests may replace its responses."""
    return ScriptedSeriesProvider({"aapl.us": AAPL_CSV, "msft.us": MSFT_CSV})


@pytest.fixture
def client(test_engine, api_provider, tmp_path) -> TestClient:
    """Provide FastAPI test client with test database and scripted provider."""
    set_settings(Settings(data_dir=tmp_path))
    reset_database()
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

    def override_get_db():
        session = TestSessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_price_provider] = lambda: api_provider
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
    reset_database()
    reset_settings()
