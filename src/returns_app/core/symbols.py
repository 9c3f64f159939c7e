"""Ticker symbol normalization for the price source."""

DEFAULT_MARKET_SUFFIX = "us"


def normalize_ticker(ticker: str) -> str:
    """Strip whitespace and uppercase a user-entered ticker ("brk.b " -> "BRK.B")."""
    return (ticker or "").strip().upper()


def to_source_symbol(ticker: str, market_suffix: str = DEFAULT_MARKET_SUFFIX) -> str:
    """
    Convert a ticker into the price source's symbol.

    "AAPL" -> "aapl.us"; "BRK.B" -> "brk-b.us"
    """
    base = normalize_ticker(ticker).replace(".", "-").lower()
    return f"{base}.{market_suffix}"
