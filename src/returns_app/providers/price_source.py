"""Price series provider protocol."""

from typing import Protocol


class PriceSeriesProvider(Protocol):
    """
    Protocol for daily price series sources.

    Implementations return the raw response body for a normalized symbol.
    The body is either a CSV table (Date,...,Close,...) or a plain-text
    notice such as the daily rate-limit message. Transport and HTTP status
    failures are raised as httpx.HTTPError.
    """

    async def fetch_series(self, symbol: str) -> str:
        """Fetch the raw daily series text for a source symbol (e.g. "aapl.us")."""
        ...
