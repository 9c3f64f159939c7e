"""Domain models package."""

from returns_app.domain.models.enums import PriceSource, ResolutionError, ResponseKind
from returns_app.domain.models.prices import (
    PriceRecord,
    SelectedPrice,
    LatestPrice,
    DemoPricePair,
)
from returns_app.domain.models.cache import CacheEntry
from returns_app.domain.models.resolution import TickerResolution, BatchResolution

__all__ = [
    "PriceSource",
    "ResolutionError",
    "ResponseKind",
    "PriceRecord",
    "SelectedPrice",
    "LatestPrice",
    "DemoPricePair",
    "CacheEntry",
    "TickerResolution",
    "BatchResolution",
]
