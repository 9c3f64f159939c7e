"""Enumerations for domain models."""

from enum import Enum


class PriceSource(str, Enum):
    """Where a ticker's price pair came from."""

    CACHE = "cache"
    NETWORK = "network"
    DEMO = "demo"


class ResolutionError(str, Enum):
    """Failure kinds of a single ticker resolution."""

    RATE_LIMITED = "RATE_LIMITED"  # quota exhausted or transport failure -> demo row
    NO_DATA_BEFORE_DATE = "NO_DATA_BEFORE_DATE"  # skipped
    NO_LATEST_DATA = "NO_LATEST_DATA"  # skipped
    INVALID_SERIES = "INVALID_SERIES"  # skipped
    STORAGE_FAILURE = "STORAGE_FAILURE"  # logged only, never surfaced


class ResponseKind(str, Enum):
    """Classification of a raw price source response body."""

    RATE_LIMITED = "RATE_LIMITED"
    TABULAR = "TABULAR"
    UNRECOGNIZED = "UNRECOGNIZED"
