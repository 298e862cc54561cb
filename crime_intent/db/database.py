"""
Database engine and session management.

Builds the SQLAlchemy engine from configuration. SQLite URLs get the
connection arguments needed for a background writer thread, and in-memory
SQLite shares a single connection so the schema survives across sessions.
"""
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from crime_intent.utils.settings import get_settings


def _is_memory_sqlite(url: str) -> bool:
    if not url.startswith("sqlite"):
        return False
    return make_url(url).database in (None, "", ":memory:")


def engine_kwargs(url: str) -> dict:
    if not url.startswith("sqlite"):
        return {}
    kwargs = {"connect_args": {"check_same_thread": False}}
    if _is_memory_sqlite(url):
        # In-memory SQLite with StaticPool so the schema persists across connections
        kwargs["poolclass"] = StaticPool
    return kwargs


def create_store_engine(url: Optional[str] = None) -> Engine:
    """Create the engine for ``url``, defaulting to the configured store."""
    url = url or get_settings().database_url
    return create_engine(url, **engine_kwargs(url))


def create_session_factory(engine: Engine) -> sessionmaker:
    # Records are converted to schemas after commit and may be read from
    # another thread, so attributes must not expire on commit.
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)


@contextmanager
def session_scope(session_factory: sessionmaker) -> Iterator[Session]:
    """Yield a Session and close it when finished."""
    db = session_factory()
    try:
        yield db
    finally:
        db.close()
