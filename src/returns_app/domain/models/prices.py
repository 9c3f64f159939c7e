"""Price points selected from a daily series."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PriceRecord:
    """One dated close price."""

    date: str
    close: float


@dataclass(frozen=True)
class SelectedPrice:
    """Close used as the purchase price (on or before the requested date)."""

    date_used: str
    close: float


@dataclass(frozen=True)
class LatestPrice:
    """Most recent valid close in a series."""

    date: str
    close: float


@dataclass(frozen=True)
class DemoPricePair:
    """Synthetic buy/sell prices used when no real data can be obtained."""

    buy: PriceRecord
    sell: PriceRecord
