"""Series cache repository protocol."""

from typing import Protocol, Optional

from returns_app.domain.models import CacheEntry


class SeriesCacheRepository(Protocol):
    """Key-value access to cached raw price series."""

    def get(self, cache_key: str) -> Optional[CacheEntry]:
        """Get the stored entry for a key, regardless of age."""
        ...

    def put(self, entry: CacheEntry) -> None:
        """Insert or overwrite the entry for its key."""
        ...

    def delete(self, cache_key: str) -> None:
        """Remove the entry for a key if present."""
        ...
