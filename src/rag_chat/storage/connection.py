"""Database engine and session factory."""

from __future__ import annotations

import logging

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from rag_chat.storage.models import Base

logger = logging.getLogger(__name__)


def get_engine(database_url: str) -> Engine:
    """Create an engine for *database_url*.

    SQLite URLs get ``check_same_thread=False`` so the engine can be shared
    by FastAPI's worker threads; in-memory SQLite additionally uses a
    :class:`StaticPool` so every session sees the same database.
    """
    kwargs: dict = {"pool_pre_ping": True}
    if database_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if ":memory:" in database_url or database_url in ("sqlite://", "sqlite+pysqlite://"):
            kwargs["poolclass"] = StaticPool
    return create_engine(database_url, **kwargs)


def get_session_factory(engine: Engine) -> sessionmaker:
    """Return a session factory with explicit transaction control."""
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


def create_tables(engine: Engine) -> None:
    """Create the ``documents`` table if it does not exist yet."""
    logger.info("Ensuring database schema on %s", engine.url.render_as_string(hide_password=True))
    Base.metadata.create_all(engine)
