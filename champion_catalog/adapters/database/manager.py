"""Async engine and session lifecycle for the repositories.

The schema itself is owned by the Alembic migrations.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from sqlalchemy.ext.asyncio import (
    AsyncSession,
    AsyncEngine,
    create_async_engine,
    async_sessionmaker,
)
from sqlalchemy.pool import NullPool

from ...config import Config

logger = logging.getLogger(__name__)


class DatabaseManager:
    """Owns the process-wide engine and hands out sessions to repositories."""

    def __init__(self, database_url: str, echo: bool = False):
        """Initialize the manager. No connection is made until ``initialize``.

        Args:
            database_url: SQLAlchemy asyncpg URL
            echo: Log every SQL statement
        """
        self.database_url = database_url
        self.echo = echo
        self._engine: Optional[AsyncEngine] = None
        self._session_factory: Optional[async_sessionmaker[AsyncSession]] = None

    @classmethod
    def from_config(cls, config: Config) -> "DatabaseManager":
        return cls(config.get_database_url(), echo=config.log_level == "DEBUG")

    @property
    def is_initialized(self) -> bool:
        return self._session_factory is not None

    async def initialize(self) -> None:
        """Create the engine and session factory."""
        if self.is_initialized:
            logger.warning("Database manager already initialized")
            return

        self._engine = create_async_engine(
            self.database_url,
            echo=self.echo,
            poolclass=NullPool,
            pool_pre_ping=True,
        )
        self._session_factory = async_sessionmaker(
            bind=self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        logger.info("Database manager initialized")

    async def close(self) -> None:
        """Dispose of the engine. Safe to call more than once."""
        if self._engine is None:
            return

        await self._engine.dispose()
        self._engine = None
        self._session_factory = None
        logger.info("Database manager closed")

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """Open a session; uncommitted work is rolled back if the block raises.

        Raises:
            RuntimeError: If ``initialize`` has not been called
        """
        if self._session_factory is None:
            raise RuntimeError("Database manager not initialized. Call initialize() first.")

        async with self._session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise
