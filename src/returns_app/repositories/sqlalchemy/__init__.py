"""SQLAlchemy repository implementations."""

from returns_app.repositories.sqlalchemy.database import (
    Base,
    get_engine,
    get_db,
    get_session,
    init_db,
    init_db_with_path,
    reset_database,
    sqlite_url,
)
from returns_app.repositories.sqlalchemy.series_cache_repo import SqlAlchemySeriesCacheRepository

__all__ = [
    "Base",
    "get_engine",
    "get_db",
    "get_session",
    "init_db",
    "init_db_with_path",
    "reset_database",
    "sqlite_url",
    "SqlAlchemySeriesCacheRepository",
]
