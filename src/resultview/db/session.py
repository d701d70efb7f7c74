"""Database engine management.

Provides cached SQLAlchemy engines keyed by database URL, configured for
thread-safe use under FastAPI concurrency.
"""

from __future__ import annotations

from pathlib import Path

from sqlalchemy import Engine, create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.pool import StaticPool

# Default database URL
DEFAULT_DATABASE_URL = "sqlite:///data/resultview.db"

# Module-level engine cache for connection pooling
_engine_cache: dict[str, Engine] = {}


def get_engine(url: str | None = None) -> Engine:
    """Get SQLAlchemy engine for the database.

    Engines are cached by URL to enable connection pooling. Subsequent
    calls with the same URL return the cached engine.

    SQLite engines use check_same_thread=False so the threads serving
    synchronous executors may share connections; in-memory databases also
    get a StaticPool so every connection sees the same data.

    Args:
        url: SQLAlchemy database URL. Defaults to sqlite:///data/resultview.db.

    Returns:
        SQLAlchemy engine instance (cached).
    """
    if url is None:
        url = DEFAULT_DATABASE_URL

    if url in _engine_cache:
        return _engine_cache[url]

    parsed = make_url(url)
    kwargs: dict = {"echo": False}

    if parsed.get_backend_name() == "sqlite":
        kwargs["connect_args"] = {"check_same_thread": False}
        database = parsed.database
        if not database or database == ":memory:":
            kwargs["poolclass"] = StaticPool
        else:
            # Create parent directories only when creating a new engine
            Path(database).parent.mkdir(parents=True, exist_ok=True)

    engine = create_engine(url, **kwargs)
    _engine_cache[url] = engine

    return engine


def dispose_engines() -> None:
    """Dispose and forget every cached engine."""
    for engine in _engine_cache.values():
        engine.dispose()
    _engine_cache.clear()
