"""Dependency injection for FastAPI."""

from typing import Optional

from fastapi import Depends
from sqlalchemy.orm import Session

from returns_app.repositories.sqlalchemy.database import get_db
from returns_app.repositories.sqlalchemy import SqlAlchemySeriesCacheRepository
from returns_app.providers import (
    PriceSeriesProvider,
    StooqSeriesProvider,
    StubSeriesProvider,
)
from returns_app.services import PriceResolver, ReturnsService, SeriesCache
from returns_app.config.settings import Settings, get_settings

# Shared across requests so concurrent fetches reuse one connection pool
_price_provider: Optional[PriceSeriesProvider] = None


def build_price_provider(settings: Settings) -> PriceSeriesProvider:
    """Stooq over HTTP, or the offline stub when offline_mode is set."""
    if settings.offline_mode:
        return StubSeriesProvider()
    return StooqSeriesProvider(
        base_url=settings.price_source_base_url,
        frequency=settings.price_source_frequency,
        timeout_seconds=settings.http_timeout_seconds,
    )


def get_price_provider() -> PriceSeriesProvider:
    """Provide the shared PriceSeriesProvider instance."""
    global _price_provider
    if _price_provider is None:
        _price_provider = build_price_provider(get_settings())
    return _price_provider


async def close_price_provider() -> None:
    """Close the shared provider's HTTP client (application shutdown)."""
    global _price_provider
    if _price_provider is not None and hasattr(_price_provider, "aclose"):
        await _price_provider.aclose()
    _price_provider = None


def get_series_cache_repo(db: Session = Depends(get_db)) -> SqlAlchemySeriesCacheRepository:
    """Provide SeriesCacheRepository instance."""
    return SqlAlchemySeriesCacheRepository(db)


def get_series_cache(
    repo: SqlAlchemySeriesCacheRepository = Depends(get_series_cache_repo),
) -> SeriesCache:
    """Provide SeriesCache instance."""
    settings = get_settings()
    return SeriesCache(
        repo=repo,
        ttl_seconds=settings.series_cache_ttl_seconds,
        namespace=settings.cache_namespace,
        market_suffix=settings.market_suffix,
    )


def get_price_resolver(
    provider: PriceSeriesProvider = Depends(get_price_provider),
    cache: SeriesCache = Depends(get_series_cache),
) -> PriceResolver:
    """Provide PriceResolver instance."""
    return PriceResolver(
        provider=provider,
        cache=cache,
        market_suffix=get_settings().market_suffix,
    )


def get_returns_service(
    resolver: PriceResolver = Depends(get_price_resolver),
) -> ReturnsService:
    """Provide ReturnsService instance."""
    return ReturnsService(
        resolver=resolver,
        default_tickers=get_settings().default_tickers,
    )
