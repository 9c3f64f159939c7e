"""SQLAlchemy ORM model definitions."""

from sqlalchemy import BigInteger, Column, String, Text

from returns_app.repositories.sqlalchemy.database import Base


class SeriesCacheORM(Base):
    """SQLAlchemy model for CacheEntry (raw daily series per symbol)."""

    __tablename__ = "series_cache"

    cache_key = Column(String(64), primary_key=True)
    timestamp_ms = Column(BigInteger, nullable=False)
    raw_series_text = Column(Text, nullable=False)
