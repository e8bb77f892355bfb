"""Database session management utilities."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from userbase_backend.database.base import BaseSchema
from userbase_backend.settings import BackendSettings, get_settings


class DatabaseService:
    """Wraps the async SQLAlchemy engine and session factory."""

    def __init__(
        self,
        url: str | None = None,
        *,
        settings: BackendSettings | None = None,
    ) -> None:
        config = settings or get_settings()
        self._engine = create_async_engine(
            url or config.database_url, echo=config.database_echo
        )
        self._session_factory = async_sessionmaker(
            bind=self._engine,
            autoflush=False,
            expire_on_commit=False,
            class_=AsyncSession,
        )

    @property
    def engine(self) -> AsyncEngine:
        """Expose the SQLAlchemy engine."""

        return self._engine

    async def create_schema(self) -> None:
        """Create all known tables that do not exist yet."""

        async with self._engine.begin() as connection:
            await connection.run_sync(BaseSchema.metadata.create_all)

    async def ping(self) -> None:
        """Round-trip a trivial statement; raises when the store is unreachable."""

        async with self._engine.connect() as connection:
            await connection.execute(text("SELECT 1"))

    async def dispose(self) -> None:
        """Close every pooled connection."""

        await self._engine.dispose()

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Provide a transactional session scope."""

        session = self._session_factory()
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
