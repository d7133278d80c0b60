"""Database Session Manager — async connection pool, schema bootstrap, health checks.

Invariants:
    - One manager per process, built by the lifespan composition root and held on app.state
    - Every session auto-rolls-back on exception (no partial commits leak)
    - connect() never raises: startup continues with the store unreachable
    - Schema is created at most once per manager; until it succeeds, every session()
      retries it, so the store recovers without a restart
    - Connection pool uses pool_pre_ping for stale connection detection

Design Decisions:
    - app.state over a module-level singleton: handlers receive the store via Depends
    - create_all on first use: the users table is created if missing, no migration tool
    - expire_on_commit=False: prevents lazy-load issues in async context
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

from calculator_service.core.errors import StoreError
from calculator_service.db.base import Base
import calculator_service.models  # noqa: F401  (registers tables on Base.metadata)

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """Manages async database sessions with pooling, rollback, and health checks."""

    def __init__(self, database_url: str, **engine_kwargs):
        if database_url.startswith("sqlite"):
            engine_kwargs.pop("pool_size", None)
            engine_kwargs.pop("max_overflow", None)
        else:
            engine_kwargs.setdefault("pool_pre_ping", True)
            engine_kwargs.setdefault("pool_recycle", 3600)
        self.engine = create_async_engine(database_url, **engine_kwargs)
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        self._schema_ready = False
        self._schema_lock = asyncio.Lock()

    async def _ensure_schema(self) -> None:
        """Create missing tables once. Raises StoreError while the store is down."""
        if self._schema_ready:
            return
        async with self._schema_lock:
            if self._schema_ready:
                return
            try:
                async with self.engine.begin() as conn:
                    await conn.run_sync(Base.metadata.create_all)
            except SQLAlchemyError as e:
                logger.error(
                    f"Error connecting to store: {e}",
                    extra={"store_operation": "connect"},
                )
                raise StoreError("connect", type(e).__name__) from e
            self._schema_ready = True

    async def connect(self) -> bool:
        """Single startup connection attempt. Logs and returns False on failure."""
        try:
            await self._ensure_schema()
        except StoreError:
            return False
        logger.info("Connected to store")
        return True

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        await self._ensure_schema()
        session = self._session_factory()
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """Check store connectivity (for the readiness endpoint)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"Store health check failed: {e}")
            return False

    async def dispose(self) -> None:
        await self.engine.dispose()


def get_db_manager(request: Request) -> DatabaseSessionManager:
    """Return the manager built by lifespan, or fail the request."""
    manager = getattr(request.app.state, "db_manager", None)
    if manager is None:
        raise RuntimeError("Database not initialized")
    return manager


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    async with get_db_manager(request).session() as session:
        yield session
