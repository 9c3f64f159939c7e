"""Cache model for raw price series."""

from dataclasses import dataclass


@dataclass
class CacheEntry:
    """
    Raw series text stored per normalized symbol.

    Entries older than the configured TTL are treated as absent on read;
    nothing ever sweeps them.
    """

    cache_key: str
    timestamp_ms: int
    raw_series_text: str
