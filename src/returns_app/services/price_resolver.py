"""
Per-ticker price resolution: cache first, then the network, then demo data.

    TryCache   -> usable cached series             -> source=cache
    TryNetwork -> rate-limit notice, cache usable   -> source=cache
               -> rate-limit notice, no cache       -> rate_limited, source=demo
               -> body is not a series              -> INVALID_SERIES (skipped)
               -> series, no close on/before date   -> NO_DATA_BEFORE_DATE (skipped)
               -> series, no valid close at all     -> NO_LATEST_DATA (skipped)
               -> series, both prices found         -> source=network
               -> transport / HTTP status failure   -> rate_limited, source=demo

Demo rows themselves are produced by the returns service for rate-limited
results; this module never fabricates prices.
"""

import logging
from typing import Optional

import httpx

from returns_app.core.symbols import DEFAULT_MARKET_SUFFIX, to_source_symbol
from returns_app.domain.models import (
    PriceSource,
    ResolutionError,
    ResponseKind,
    TickerResolution,
)
from returns_app.providers.price_source import PriceSeriesProvider
from returns_app.services.price_selector import find_latest, find_on_or_before
from returns_app.services.series_cache import SeriesCache
from returns_app.services.series_parser import classify_response, parse_series

logger = logging.getLogger(__name__)


class PriceResolver:
    """Resolves a purchase price and a latest price for one ticker at a time."""

    def __init__(
        self,
        provider: PriceSeriesProvider,
        cache: SeriesCache,
        market_suffix: str = DEFAULT_MARKET_SUFFIX,
    ):
        self._provider = provider
        self._cache = cache
        self._market_suffix = market_suffix

    async def resolve(self, ticker: str, date_iso: str) -> TickerResolution:
        """Resolve `ticker` for `date_iso`; never raises for data or transport problems."""
        cached = self._from_cache(ticker, date_iso)
        if cached is not None:
            return cached
        return await self._from_network(ticker, date_iso)

    def _from_cache(self, ticker: str, date_iso: str) -> Optional[TickerResolution]:
        """A cache-sourced success, or None when the cache cannot answer."""
        text = self._cache.read(ticker)
        if not text:
            return None
        series = parse_series(text)
        if not series:
            return None
        selected = find_on_or_before(series, date_iso)
        latest = find_latest(series)
        if selected is None or latest is None:
            return None
        return TickerResolution.success(ticker, selected, latest, PriceSource.CACHE)

    async def _from_network(self, ticker: str, date_iso: str) -> TickerResolution:
        symbol = to_source_symbol(ticker, self._market_suffix)
        try:
            text = await self._provider.fetch_series(symbol)
        except httpx.HTTPError as exc:
            logger.warning("Network/HTTP error for %s (%s): %s", ticker, symbol, exc)
            return TickerResolution.failure(
                ticker,
                ResolutionError.RATE_LIMITED,
                f"Network/HTTP error: {exc}",
                PriceSource.DEMO,
                reason="transport failure",
            )

        if classify_response(text) == ResponseKind.RATE_LIMITED:
            return self._on_rate_limited(ticker, date_iso)

        series = parse_series(text)
        if not series:
            return TickerResolution.failure(
                ticker,
                ResolutionError.INVALID_SERIES,
                "No data / invalid series",
                PriceSource.NETWORK,
            )

        self._cache.write(ticker, text)

        selected = find_on_or_before(series, date_iso)
        if selected is None:
            return TickerResolution.failure(
                ticker,
                ResolutionError.NO_DATA_BEFORE_DATE,
                f"No data on or before {date_iso}",
                PriceSource.NETWORK,
            )
        latest = find_latest(series)
        if latest is None:
            return TickerResolution.failure(
                ticker,
                ResolutionError.NO_LATEST_DATA,
                "No latest data",
                PriceSource.NETWORK,
            )
        return TickerResolution.success(ticker, selected, latest, PriceSource.NETWORK)

    def _on_rate_limited(self, ticker: str, date_iso: str) -> TickerResolution:
        # Another request may have filled the cache since the first look.
        cached = self._from_cache(ticker, date_iso)
        if cached is not None:
            logger.warning("[RATE LIMIT][CACHE USED] %s", ticker)
            return cached
        return TickerResolution.failure(
            ticker,
            ResolutionError.RATE_LIMITED,
            "Rate limited",
            PriceSource.DEMO,
            reason="daily hits limit, cache missing",
        )
