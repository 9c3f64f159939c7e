"""SQLAlchemy implementation of SeriesCacheRepository."""

from typing import Optional

from sqlalchemy.orm import Session

from returns_app.domain.models import CacheEntry
from returns_app.repositories.sqlalchemy.orm_models import SeriesCacheORM


class SqlAlchemySeriesCacheRepository:
    """SQLAlchemy-backed store of raw price series."""

    def __init__(self, db: Session):
        self._db = db

    def get(self, cache_key: str) -> Optional[CacheEntry]:
        """Get the stored entry for a key, regardless of age."""
        orm_entry = self._db.get(SeriesCacheORM, cache_key)
        return self._to_domain(orm_entry) if orm_entry else None

    def put(self, entry: CacheEntry) -> None:
        """Insert or overwrite the entry for its key."""
        orm_entry = self._db.get(SeriesCacheORM, entry.cache_key)

        if orm_entry:
            orm_entry.timestamp_ms = entry.timestamp_ms
            orm_entry.raw_series_text = entry.raw_series_text
        else:
            orm_entry = SeriesCacheORM(
                cache_key=entry.cache_key,
                timestamp_ms=entry.timestamp_ms,
                raw_series_text=entry.raw_series_text,
            )
            self._db.add(orm_entry)

        try:
            self._db.commit()
        except Exception:
            self._db.rollback()
            raise

    def delete(self, cache_key: str) -> None:
        """Remove the entry for a key if present."""
        self._db.query(SeriesCacheORM).filter(
            SeriesCacheORM.cache_key == cache_key
        ).delete()
        self._db.commit()

    @staticmethod
    def _to_domain(orm: SeriesCacheORM) -> CacheEntry:
        """Convert ORM entry to domain model."""
        return CacheEntry(
            cache_key=orm.cache_key,
            timestamp_ms=int(orm.timestamp_ms),
            raw_series_text=orm.raw_series_text or "",
        )
