"""Async database engine and session management.

One ``Database`` is created per CLI invocation and disposed when it ends;
there is no module-level engine.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

import lancer.infrastructure.persistence.sqlalchemy.models  # noqa: F401
from lancer.infrastructure.persistence.sqlalchemy.models.base import Base
from lancer_config.settings import to_async_database_url

logger = logging.getLogger(__name__)


class Database:
    """Owns the engine (and its connection pool) for one invocation.

    Examples
    --------
    >>> async with Database("postgresql://user:pw@localhost/lancer") as db:
    ...     async with db.session() as session:
    ...         ...
    """

    def __init__(self, database_url: str, *, echo: bool = False) -> None:
        self._engine: AsyncEngine = create_async_engine(
            to_async_database_url(database_url),
            echo=echo,
            pool_pre_ping=True,
        )
        self._session_maker = async_sessionmaker(
            self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Open a session bound to this database."""
        async with self._session_maker() as session:
            yield session

    async def create_tables(self) -> None:
        """Create all marketplace tables (idempotent).

        Uses SQLAlchemy's create_all() which only creates missing tables.
        Existing tables and their data are never modified or deleted.
        """
        logger.info("Ensuring all database tables exist...")
        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database schema is up to date (missing tables created if needed)")

    async def dispose(self) -> None:
        """Close every pooled connection."""
        await self._engine.dispose()
        logger.debug("Database connection pool closed")

    async def __aenter__(self) -> "Database":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.dispose()
