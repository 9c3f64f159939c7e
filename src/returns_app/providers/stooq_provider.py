"""Stooq daily CSV price source over HTTP."""

import logging
from typing import Optional

import httpx

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://stooq.com"
DEFAULT_FREQUENCY = "d"
DEFAULT_TIMEOUT_SECONDS = 10.0


class StooqSeriesProvider:
    """
    Fetches daily history as CSV text from Stooq's download endpoint.

    One AsyncClient is shared by all concurrent fetches; pass a client in to
    control transport and lifecycle (tests use httpx.MockTransport).
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        frequency: str = DEFAULT_FREQUENCY,
        timeout_seconds: Optional[float] = DEFAULT_TIMEOUT_SECONDS,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._frequency = frequency
        self._timeout = timeout_seconds
        self._client = client
        self._owns_client = client is None

    def series_url(self, symbol: str) -> str:
        """Return the download URL for a source symbol."""
        return f"{self._base_url}/q/d/l/?s={symbol}&i={self._frequency}"

    async def fetch_series(self, symbol: str) -> str:
        """GET the CSV for `symbol`; raises httpx.HTTPError on transport or status failure."""
        client = self._get_client()
        response = await client.get(self.series_url(symbol))
        response.raise_for_status()
        logger.debug("Fetched %s: %d bytes", symbol, len(response.content))
        return response.text

    async def aclose(self) -> None:
        """Close the underlying client if this provider created it."""
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout)
        return self._client
