"""
SQLite storage for the series cache.

One engine and its session factory live at module level. They are built
lazily from the configured database URL and rebuilt after reset_database()
whenever the data directory changes.
"""

from pathlib import Path
from typing import Generator, Optional

from sqlalchemy import create_engine, Engine
from sqlalchemy.orm import sessionmaker, Session, declarative_base

from returns_app.config.settings import get_settings, set_settings

Base = declarative_base()

_engine: Optional[Engine] = None
_session_factory: Optional[sessionmaker] = None


def sqlite_url(db_path: Path) -> str:
    """SQLAlchemy URL for a SQLite file."""
    return f"sqlite:///{db_path}"


def get_engine() -> Engine:
    """Engine for the configured database URL, created on first use."""
    global _engine, _session_factory
    if _engine is None:
        _engine = create_engine(
            get_settings().get_database_url(),
            # Sessions cross between the event loop and FastAPI's threadpool
            connect_args={"check_same_thread": False},
        )
        _session_factory = sessionmaker(bind=_engine, autoflush=False)
    return _engine


def _new_session() -> Session:
    get_engine()
    return _session_factory()


def get_db() -> Generator[Session, None, None]:
    """FastAPI dependency: one session per request."""
    db = _new_session()
    try:
        yield db
    finally:
        db.close()


def get_session() -> Session:
    """New session owned by the caller (in-process use)."""
    return _new_session()


def init_db() -> None:
    """Create the series_cache table if it does not exist."""
    from returns_app.repositories.sqlalchemy import orm_models  # noqa: F401

    Base.metadata.create_all(bind=get_engine())


def init_db_with_path(db_path: Path) -> None:
    """Point the settings at a SQLite file, rebuild the engine and create tables."""
    settings = get_settings()
    set_settings(settings.model_copy(update={"database_url": sqlite_url(db_path)}))
    reset_database()
    init_db()


def reset_database() -> None:
    """Drop the engine so the next use picks up the current settings."""
    global _engine, _session_factory

    if _engine is not None:
        _engine.dispose()

    _engine = None
    _session_factory = None
