"""Series cache: raw per-ticker CSV text with a time-to-live."""

import logging
from datetime import datetime
from typing import Callable, Optional

from returns_app.core.symbols import DEFAULT_MARKET_SUFFIX, to_source_symbol
from returns_app.core.timezone import now_eastern, to_epoch_ms
from returns_app.domain.models import CacheEntry, ResolutionError
from returns_app.repositories.protocols import SeriesCacheRepository

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 24 * 60 * 60
DEFAULT_NAMESPACE = "stooq"


class SeriesCache:
    """
    Best-effort cache of raw series text, keyed by normalized symbol.

    Expiry is checked lazily on read. Storage failures are logged and
    swallowed: a broken cache behaves like an empty one.

    Reads and writes are plain blocking calls, made directly from the
    resolver coroutines. One SQLAlchemy session backs a whole batch and is
    not thread-safe, so calls stay on the event loop thread rather than
    going through asyncio.to_thread.
    """

    def __init__(
        self,
        repo: SeriesCacheRepository,
        ttl_seconds: int = DEFAULT_TTL_SECONDS,
        namespace: str = DEFAULT_NAMESPACE,
        market_suffix: str = DEFAULT_MARKET_SUFFIX,
        clock: Callable[[], datetime] = now_eastern,
    ):
        self._repo = repo
        self._ttl_ms = ttl_seconds * 1000
        self._namespace = namespace
        self._market_suffix = market_suffix
        self._clock = clock

    def cache_key(self, ticker: str) -> str:
        """Namespaced key for a ticker, e.g. BRK.B -> stooq:brk-b.us."""
        return f"{self._namespace}:{to_source_symbol(ticker, self._market_suffix)}"

    def read(self, ticker: str) -> Optional[str]:
        """Return cached series text, or None if absent, empty, stale or unreadable."""
        key = self.cache_key(ticker)
        try:
            entry = self._repo.get(key)
        except Exception as exc:
            logger.warning("[%s] read %s: %s", ResolutionError.STORAGE_FAILURE.value, key, exc)
            return None

        if entry is None or not entry.raw_series_text:
            return None
        if not self.is_fresh(entry):
            logger.debug("Cache for %s is stale", key)
            return None
        return entry.raw_series_text

    def write(self, ticker: str, raw_text: str) -> None:
        """Store series text stamped with the current time; never raises."""
        key = self.cache_key(ticker)
        entry = CacheEntry(
            cache_key=key,
            timestamp_ms=to_epoch_ms(self._clock()),
            raw_series_text=raw_text,
        )
        try:
            self._repo.put(entry)
        except Exception as exc:
            logger.warning("[%s] write %s: %s", ResolutionError.STORAGE_FAILURE.value, key, exc)
            return
        logger.info("[CACHE WRITE] %s", ticker)

    def is_fresh(self, entry: CacheEntry, now: Optional[datetime] = None) -> bool:
        """An entry is fresh until it is more than the TTL old."""
        now_ms = to_epoch_ms(now or self._clock())
        return now_ms - entry.timestamp_ms <= self._ttl_ms
