"""Repository layer - data access abstractions and implementations."""

from returns_app.repositories.protocols import SeriesCacheRepository

__all__ = [
    "SeriesCacheRepository",
]
