"""
Relational database handle.

Owns the SQLAlchemy engine and its connection pool. One instance is built
by the composition root at startup, injected into repositories, and
disposed at shutdown. There is no module-level connection.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.config import Settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Declarative base for all ORM models."""


def build_engine(settings: Settings) -> Engine:
    """Build a SQLAlchemy engine with pool limits taken from settings.

    Args:
        settings: Validated application settings.

    Returns:
        A configured engine. No connection is opened yet.
    """
    url = settings.database_url()
    if settings.db_driver == "sqlite":
        kwargs: dict = {"connect_args": {"check_same_thread": False}}
        if settings.db_name == ":memory:":
            kwargs["poolclass"] = StaticPool
        return create_engine(url, **kwargs)

    max_idle = settings.db_pool_max_idle
    max_open = settings.db_pool_max_open
    return create_engine(
        url,
        pool_pre_ping=True,
        pool_size=max_idle,
        max_overflow=max(max_open - max_idle, 0) if max_open > 0 else -1,
        pool_recycle=settings.db_pool_conn_lifetime or -1,
    )


class Database:
    """Engine plus session factory, passed explicitly to repositories."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine
        self._session_factory = sessionmaker(
            bind=engine, autoflush=False, expire_on_commit=False
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(build_engine(settings))

    @property
    def engine(self) -> Engine:
        return self._engine

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Yield a session, rolling back on error and always closing it."""
        session = self._session_factory()
        try:
            yield session
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def create_all(self) -> None:
        """Create every table registered on ``Base`` that does not exist yet."""
        # Models must be imported so they register on Base.metadata.
        import app.infrastructure.demo.models  # noqa: F401

        Base.metadata.create_all(self._engine)
        logger.info("Database schema ensured (%d tables).", len(Base.metadata.tables))

    def dispose(self) -> None:
        """Close every pooled connection."""
        self._engine.dispose()
        logger.info("Database connection pool disposed.")
