"""Price series providers module."""

from returns_app.providers.price_source import PriceSeriesProvider
from returns_app.providers.stooq_provider import StooqSeriesProvider
from returns_app.providers.stub_provider import StubSeriesProvider

__all__ = [
    "PriceSeriesProvider",
    "StooqSeriesProvider",
    "StubSeriesProvider",
]
