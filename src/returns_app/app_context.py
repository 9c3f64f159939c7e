"""Application context for in-process service management.

Provides a centralized way to access the returns pipeline without HTTP.
Used by an embedding UI to run estimates directly.
"""

import asyncio
from decimal import Decimal
from pathlib import Path
from typing import Optional, Sequence

from returns_app.api.deps import build_price_provider
from returns_app.config.settings import Settings, set_settings, get_settings
from returns_app.domain.views import ReturnsReport
from returns_app.providers import PriceSeriesProvider
from returns_app.repositories.sqlalchemy.database import (
    init_db_with_path,
    get_session,
)
from returns_app.repositories.sqlalchemy import SqlAlchemySeriesCacheRepository
from returns_app.services import PriceResolver, ReturnsService, SeriesCache


class AppContext:
    """
    Application context providing in-process access to the returns service.

    A provider passed in is used as-is and never closed here; otherwise one
    is built from settings and closed after each blocking estimate.
    """

    def __init__(
        self,
        data_dir: Optional[Path] = None,
        provider: Optional[PriceSeriesProvider] = None,
    ):
        self._data_dir = data_dir
        self._session = None
        self._initialized = False
        self._injected_provider = provider
        self._provider: Optional[PriceSeriesProvider] = provider

        # Service instances (lazy initialized)
        self._series_cache: Optional[SeriesCache] = None
        self._returns_service: Optional[ReturnsService] = None

    def initialize(self, data_dir: Optional[Path] = None) -> None:
        """
        Initialize or reinitialize the application with a data directory.

        Args:
            data_dir: Data directory path. Uses default if not provided.
        """
        if data_dir:
            self._data_dir = data_dir

        settings = Settings(data_dir=self._data_dir)
        set_settings(settings)

        init_db_with_path(settings.get_data_dir() / "series_cache.db")

        self._session = None
        self._series_cache = None
        self._returns_service = None

        self._initialized = True

    @property
    def is_initialized(self) -> bool:
        """Check if context is initialized."""
        return self._initialized

    @property
    def data_dir(self) -> Path:
        """Get the current data directory."""
        return get_settings().get_data_dir()

    def _get_session(self):
        """Get or create database session."""
        if self._session is None:
            self._session = get_session()
        return self._session

    @property
    def provider(self) -> PriceSeriesProvider:
        """Get the price series provider."""
        if self._provider is None:
            self._provider = build_price_provider(get_settings())
            self._returns_service = None
        return self._provider

    @property
    def series_cache(self) -> SeriesCache:
        """Get the SeriesCache instance."""
        if self._series_cache is None:
            settings = get_settings()
            self._series_cache = SeriesCache(
                repo=SqlAlchemySeriesCacheRepository(self._get_session()),
                ttl_seconds=settings.series_cache_ttl_seconds,
                namespace=settings.cache_namespace,
                market_suffix=settings.market_suffix,
            )
        return self._series_cache

    @property
    def returns(self) -> ReturnsService:
        """Get the ReturnsService instance."""
        provider = self.provider
        if self._returns_service is None:
            settings = get_settings()
            resolver = PriceResolver(
                provider=provider,
                cache=self.series_cache,
                market_suffix=settings.market_suffix,
            )
            self._returns_service = ReturnsService(
                resolver=resolver,
                default_tickers=settings.default_tickers,
            )
        return self._returns_service

    def estimate_returns(
        self,
        start_date_iso: str,
        amount: float | Decimal,
        tickers: Optional[Sequence[str]] = None,
    ) -> ReturnsReport:
        """Blocking estimate for callers without a running event loop."""
        return asyncio.run(self._estimate_once(start_date_iso, amount, tickers))

    async def _estimate_once(
        self,
        start_date_iso: str,
        amount: float | Decimal,
        tickers: Optional[Sequence[str]],
    ) -> ReturnsReport:
        try:
            return await self.returns.build_report(start_date_iso, amount, tickers)
        finally:
            # The HTTP client is bound to this run's event loop
            await self._release_own_provider()

    async def _release_own_provider(self) -> None:
        if self._injected_provider is None and self._provider is not None:
            if hasattr(self._provider, "aclose"):
                await self._provider.aclose()
            self._provider = None

    def close(self) -> None:
        """Clean up resources."""
        if self._session:
            self._session.close()
            self._session = None


# Global application context (singleton for embedding UIs)
_app_context: Optional[AppContext] = None


def get_app_context() -> AppContext:
    """Get or create the global application context."""
    global _app_context
    if _app_context is None:
        _app_context = AppContext()
    return _app_context


def set_app_context(context: AppContext) -> None:
    """Set the global application context."""
    global _app_context
    _app_context = context
