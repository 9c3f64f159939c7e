"""Service layer - price resolution pipeline and return calculations."""

from returns_app.services.series_parser import (
    RATE_LIMIT_MARKER,
    classify_response,
    parse_series,
)
from returns_app.services.price_selector import find_on_or_before, find_latest
from returns_app.services.series_cache import SeriesCache
from returns_app.services.demo_generator import hash_str, make_demo_pair
from returns_app.services.row_builder import build_row, summarize
from returns_app.services.price_resolver import PriceResolver
from returns_app.services.returns_service import ReturnsService

__all__ = [
    "RATE_LIMIT_MARKER",
    "classify_response",
    "parse_series",
    "find_on_or_before",
    "find_latest",
    "SeriesCache",
    "hash_str",
    "make_demo_pair",
    "build_row",
    "summarize",
    "PriceResolver",
    "ReturnsService",
]
