"""
Record store connection management.

Provides the RecordStoreClient: one async SQLAlchemy engine and session
factory per process, created explicitly at startup and injected where
needed.

Dependencies: sqlalchemy, backend.configs
System role: Record store connection lifecycle management
"""

import logging
from typing import Any

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from backend.boundary.db.base import Base
from backend.configs import Settings, get_settings
from backend.core.exceptions import RecordStoreError

logger = logging.getLogger(__name__)


class RecordStoreClient:
    """
    Process-wide handle on the record store.

    Holds the async engine and session factory. ``initialize()`` is
    idempotent: once an engine exists, further calls return immediately.
    Each caller gets its own session from ``session()`` so concurrent
    collection reads never share one.
    """

    def __init__(
        self,
        database_url: str,
        echo: bool = False,
        engine_options: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize client without connecting.

        Args:
            database_url: Async SQLAlchemy URL (postgresql+asyncpg, sqlite+aiosqlite)
            echo: Echo SQL statements to logs
            engine_options: Extra keyword arguments for create_async_engine
        """
        self.database_url = database_url
        self._echo = echo
        self._engine_options = engine_options or {}
        self._engine: AsyncEngine | None = None
        self._session_factory: async_sessionmaker[AsyncSession] | None = None

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "RecordStoreClient":
        """
        Build a client from application settings.

        Pool sizing is only passed for server databases; SQLite engines
        reject it.

        Args:
            settings: Application settings (defaults to get_settings())

        Returns:
            RecordStoreClient: Unconnected client
        """
        db_config = (settings or get_settings()).database
        engine_options: dict[str, Any] = {}
        if not db_config.is_sqlite:
            engine_options = {
                "pool_size": db_config.pool_size,
                "max_overflow": db_config.max_overflow,
                "pool_timeout": db_config.pool_timeout,
                "pool_pre_ping": True,
            }
        return cls(
            db_config.async_database_url,
            echo=db_config.echo_sql,
            engine_options=engine_options,
        )

    @property
    def is_initialized(self) -> bool:
        """True once the engine and session factory exist."""
        return self._engine is not None

    @property
    def engine(self) -> AsyncEngine:
        """Get the engine, failing if initialize() has not run."""
        if self._engine is None:
            raise RecordStoreError("Record store is not initialized", operation="engine")
        return self._engine

    async def initialize(self) -> None:
        """
        Create the engine and verify connectivity.

        A second call is a no-op. Failure here is treated as fatal by the
        application lifespan.

        Raises:
            RecordStoreError: If the URL is invalid or the store is unreachable
        """
        if self._engine is not None:
            logger.debug("Record store already initialized")
            return

        try:
            engine = create_async_engine(
                self.database_url,
                echo=self._echo,
                **self._engine_options,
            )
            async with engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except Exception as e:
            raise RecordStoreError(
                f"Failed to initialize record store: {type(e).__name__}",
                operation="initialize",
            ) from e

        self._engine = engine
        self._session_factory = async_sessionmaker(
            bind=engine,
            autoflush=False,
            expire_on_commit=False,
        )
        logger.info("Record store initialized", extra={"dialect": engine.dialect.name})

    def session(self) -> AsyncSession:
        """
        Open a new async session.

        Returns:
            AsyncSession: Session to be used as an async context manager

        Raises:
            RecordStoreError: If initialize() has not run
        """
        if self._session_factory is None:
            raise RecordStoreError("Record store is not initialized", operation="session")
        return self._session_factory()

    async def create_tables(self) -> None:
        """
        Create all tables registered on Base.metadata.

        Idempotent: existing tables are left unchanged.
        """
        # Registers RecordModel with Base.metadata
        from backend.boundary.db.models import RecordModel  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        """Release pooled connections and reset the client."""
        if self._engine is not None:
            await self._engine.dispose()
        self._engine = None
        self._session_factory = None

