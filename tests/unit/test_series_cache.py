"""
Unit tests for SeriesCache.

Tests cover:
- Key normalization
- Read-after-write
- TTL expiry on read
- Swallowed storage failures
"""

from returns_app.services.series_cache import SeriesCache

from tests.conftest import (
    AAPL_CSV,
    FailingSeriesCacheRepository,
    FakeClock,
    InMemorySeriesCacheRepository,
)


class TestCacheKey:
    """Tests for cache key derivation."""

    def test_key_is_namespaced_normalized_symbol(self, series_cache):
        assert series_cache.cache_key("AAPL") == "stooq:aapl.us"
        assert series_cache.cache_key("BRK.B") == "stooq:brk-b.us"
        assert series_cache.cache_key(" brk.b ") == "stooq:brk-b.us"

    def test_custom_namespace_and_suffix(self, memory_repo, clock):
        cache = SeriesCache(repo=memory_repo, namespace="px", market_suffix="uk", clock=clock)
        assert cache.cache_key("VOD") == "px:vod.uk"


class TestReadWrite:
    """Tests for read/write round trips."""

    def test_read_missing_is_none(self, series_cache):
        assert series_cache.read("AAPL") is None

    def test_write_then_read(self, series_cache, memory_repo, fixed_now):
        """
        GIVEN an empty cache
        WHEN I write AAPL series text
        THEN reading AAPL returns the same text, stamped with the clock time
        """
        series_cache.write("AAPL", AAPL_CSV)

        assert series_cache.read("AAPL") == AAPL_CSV
        entry = memory_repo.entries["stooq:aapl.us"]
        assert entry.timestamp_ms == int(fixed_now.timestamp() * 1000)

    def test_spellings_share_one_entry(self, series_cache):
        series_cache.write("brk.b", "Date,Close\n2025-01-10,1\n")
        assert series_cache.read("BRK.B") == "Date,Close\n2025-01-10,1\n"

    def test_overwrite_refreshes_timestamp(self, series_cache, memory_repo, clock):
        series_cache.write("AAPL", "old")
        clock.advance(hours=20)
        series_cache.write("AAPL", AAPL_CSV)
        clock.advance(hours=20)

        assert series_cache.read("AAPL") == AAPL_CSV

    def test_empty_text_reads_as_missing(self, series_cache):
        series_cache.write("AAPL", "")
        assert series_cache.read("AAPL") is None


class TestTtl:
    """Entries expire 24 hours after they are written."""

    def test_usable_just_before_ttl(self, series_cache, clock):
        series_cache.write("AAPL", AAPL_CSV)
        clock.advance(hours=23, minutes=59)

        assert series_cache.read("AAPL") == AAPL_CSV

    def test_stale_just_after_ttl(self, series_cache, clock):
        series_cache.write("AAPL", AAPL_CSV)
        clock.advance(hours=24, minutes=1)

        assert series_cache.read("AAPL") is None

    def test_stale_entry_is_not_deleted(self, series_cache, memory_repo, clock):
        series_cache.write("AAPL", AAPL_CSV)
        clock.advance(days=3)

        assert series_cache.read("AAPL") is None
        assert "stooq:aapl.us" in memory_repo.entries

    def test_custom_ttl(self, fixed_now):
        clock = FakeClock(fixed_now)
        cache = SeriesCache(repo=InMemorySeriesCacheRepository(), ttl_seconds=60, clock=clock)
        cache.write("AAPL", AAPL_CSV)

        clock.advance(seconds=59)
        assert cache.read("AAPL") == AAPL_CSV
        clock.advance(seconds=2)
        assert cache.read("AAPL") is None


class TestStorageFailures:
    """Storage failures never reach the caller."""

    def test_failed_write_is_swallowed(self, clock):
        cache = SeriesCache(repo=FailingSeriesCacheRepository(), clock=clock)
        cache.write("AAPL", AAPL_CSV)

    def test_failed_read_is_a_miss(self, clock):
        cache = SeriesCache(repo=FailingSeriesCacheRepository(), clock=clock)
        assert cache.read("AAPL") is None
