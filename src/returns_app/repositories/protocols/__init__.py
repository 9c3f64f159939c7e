"""Repository protocol definitions (interfaces)."""

from returns_app.repositories.protocols.series_cache_repo import SeriesCacheRepository

__all__ = [
    "SeriesCacheRepository",
]
