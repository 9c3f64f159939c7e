"""Stub price series provider for offline/testing use."""

from returns_app.services.series_parser import RATE_LIMIT_MARKER


class StubSeriesProvider:
    """
    Offline provider that never reaches the network.

    Every fetch answers with the source's rate-limit notice, so tickers are
    served from the series cache when possible and from demo data otherwise.
    """

    def __init__(self) -> None:
        self.requested: list[str] = []

    async def fetch_series(self, symbol: str) -> str:
        """Record the request and return the rate-limit notice."""
        self.requested.append(symbol)
        return RATE_LIMIT_MARKER
