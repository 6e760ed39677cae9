"""Database configuration and session management for the response cache.

This module provides SQLAlchemy 2.x ORM infrastructure including:
- Engine creation with a SQLite backend
- A fallback to a temp-directory database when the primary location is not
  writable (read-only or ephemeral deploy filesystems)
- Session factory with proper transaction handling
- Context manager for safe session usage

The database URL can be overridden via the CACHE_DB_URL environment variable.
Defaults to sqlite:///<project_root>/cache.db for local persistence.
"""

from __future__ import annotations

import logging
import os
import tempfile
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.engine import URL, Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

_CACHE_DB_FILENAME = "cache.db"


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models."""


class StorageUnavailableError(RuntimeError):
    """Raised when no database location can be opened for writing."""


_engine: Engine | None = None
_SessionLocal: sessionmaker[Session] | None = None
# Guards lazy creation and disposal of the engine and session factory.
_engine_lock = threading.RLock()


def get_database_url(override: str | None = None) -> str:
    """Return the database URL, allowing overrides via argument or environment."""
    if override:
        return override
    env_url = os.getenv("CACHE_DB_URL")
    if env_url:
        return env_url

    project_root = Path(__file__).resolve().parents[3]
    db_path = project_root / _CACHE_DB_FILENAME
    return URL.create("sqlite", database=str(db_path)).render_as_string(hide_password=False)


def get_temp_database_url() -> str:
    """Return a SQLite URL inside the system temp directory."""
    db_path = Path(tempfile.gettempdir()) / "codejedi_portfolio" / _CACHE_DB_FILENAME
    return URL.create("sqlite", database=str(db_path)).render_as_string(hide_password=False)


def _is_memory_url(url: str) -> bool:
    return url in {"sqlite://", "sqlite:///:memory:"}


def _create_engine(url: str) -> Engine:
    if _is_memory_url(url):
        # One shared connection so every thread sees the same in-memory tables.
        return create_engine(
            url,
            echo=False,
            future=True,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    if url.startswith("sqlite:///"):
        Path(url.removeprefix("sqlite:///")).parent.mkdir(parents=True, exist_ok=True)
    return create_engine(url, echo=False, future=True)


def _ensure_tables_created(engine: Engine) -> None:
    """Ensure all ORM tables are created on the given engine."""
    # Import ORM models so their metadata is registered on Base before create_all.
    from codejedi_portfolio.data.models import cache_entry  # noqa: F401

    Base.metadata.create_all(bind=engine)


def _open_engine(url: str) -> Engine:
    engine = _create_engine(url)
    try:
        _ensure_tables_created(engine)
    except SQLAlchemyError:
        engine.dispose()
        raise
    return engine


def _get_engine(url: str | None = None) -> Engine:
    global _engine
    if _engine is not None:
        return _engine
    with _engine_lock:
        if _engine is not None:
            return _engine
        primary = get_database_url(url)
        try:
            _engine = _open_engine(primary)
        except (SQLAlchemyError, OSError) as exc:
            fallback = get_temp_database_url()
            logger.warning(
                "Cache database %s is not writable (%s); falling back to %s",
                primary,
                exc,
                fallback,
            )
            try:
                _engine = _open_engine(fallback)
            except (SQLAlchemyError, OSError) as fallback_exc:
                raise StorageUnavailableError(
                    f"No writable cache database location: {fallback_exc}"
                ) from fallback_exc
    return _engine


def _get_session_factory() -> sessionmaker[Session]:
    global _SessionLocal
    with _engine_lock:
        if _SessionLocal is None:
            _SessionLocal = sessionmaker(
                bind=_get_engine(),
                autoflush=False,
                expire_on_commit=False,
            )
        return _SessionLocal


def init_db(url: str | None = None) -> Engine:
    """Open the cache database, creating tables on first use.

    Raises:
        StorageUnavailableError: If neither the configured location nor the
            temp directory can hold the database.
    """
    return _get_engine(url)


def dispose_engine() -> None:
    """Release pooled connections and forget the current engine."""
    global _engine, _SessionLocal
    with _engine_lock:
        if _engine is not None:
            _engine.dispose()
        _engine = None
        _SessionLocal = None


@contextmanager
def get_session() -> Iterator[Session]:
    """Provide a transactional scope around a series of operations."""
    session = _get_session_factory()()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
