# 📄 File: app/shared/infrastructure/database/connection.py
#
# 🧭 Purpose (Layman Explanation):
# Opens and closes the app's line to the database, checks it is alive, and
# shares it efficiently between many requests.
#
# 🧪 Purpose (Technical Summary):
# Async SQLAlchemy engine lifecycle management with connection pooling,
# health checks with retry and SQLite transaction fixes for local/test runs.
#
# 🔗 Dependencies:
# - sqlalchemy (async engine, events)
# - asyncpg / aiosqlite (async drivers)
# - app/shared/config (settings, engine options, declarative base)
#
# 🔄 Connected Modules / Calls From:
# - app/shared/infrastructure/database/session.py (session factory)
# - app/main.py (startup/shutdown)
# - app/api/v1/health.py (database health)

import asyncio
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from app.shared.config.database import DatabaseBase, engine_kwargs
from app.shared.config.settings import get_settings

logger = logging.getLogger(__name__)

# Re-exported for model modules
Base = DatabaseBase


def create_engine_for_url(url: str) -> AsyncEngine:
    """
    Create an async engine for ``url`` with the environment's pool options.

    For SQLite the pysqlite driver's implicit transaction handling is turned
    off and BEGIN is emitted explicitly, so SAVEPOINT-based nested
    transactions behave like they do on PostgreSQL.
    """
    engine = create_async_engine(url, **engine_kwargs(get_settings(), url))

    if url.startswith("sqlite"):
        @event.listens_for(engine.sync_engine, "connect")
        def set_sqlite_pragma(dbapi_connection, connection_record):
            dbapi_connection.isolation_level = None

        @event.listens_for(engine.sync_engine, "begin")
        def do_begin(conn):
            conn.exec_driver_sql("BEGIN")

    return engine


class DatabaseConnectionManager:
    """
    Manages the database engine with pooling, health monitoring and
    retrying health checks.
    """

    def __init__(self):
        self._engine: Optional[AsyncEngine] = None
        self._health_check_query = text("SELECT 1")
        self._retry_attempts = 3
        self._retry_delay = 1.0

    async def initialize(self, url: Optional[str] = None) -> None:
        """Initialize database engine with connection pooling."""
        if self._engine is not None:
            logger.warning("Database engine already initialized")
            return

        settings = get_settings()
        url = url or settings.database_url

        logger.info("Initializing database connection pool...")
        self._engine = create_engine_for_url(url)

        health = await self.health_check()
        if health["status"] != "healthy":
            await self.close()
            raise ConnectionError(health.get("error", "Database health check failed"))

        logger.info(f"Database connection pool initialized ({self._engine.url.get_backend_name()})")

    async def create_all(self) -> None:
        """Create all tables from model metadata (SQLite/local development)."""
        if self._engine is None:
            raise RuntimeError("Database engine not initialized")

        async with self._engine.begin() as conn:
            await conn.run_sync(DatabaseBase.metadata.create_all)

    async def health_check(self) -> Dict[str, Any]:
        """
        Perform database health check and return structured status.
        """
        if self._engine is None:
            return {
                "status": "unhealthy",
                "error": "Database engine not initialized",
                "timestamp": datetime.now(timezone.utc).isoformat()
            }

        for attempt in range(self._retry_attempts):
            try:
                async with self._engine.connect() as conn:
                    result = await conn.execute(self._health_check_query)
                    result.scalar()

                logger.debug("Database health check passed")
                return {
                    "status": "healthy",
                    "timestamp": datetime.now(timezone.utc).isoformat()
                }

            except Exception as e:
                logger.warning(
                    f"Database health check failed (attempt {attempt + 1}/{self._retry_attempts}): {e}"
                )
                if attempt < self._retry_attempts - 1:
                    await asyncio.sleep(self._retry_delay * (2 ** attempt))

        logger.error("Database health check failed after all retry attempts")
        return {
            "status": "unhealthy",
            "error": "Database health check failed after all retry attempts",
            "timestamp": datetime.now(timezone.utc).isoformat()
        }

    async def close(self) -> None:
        """Close database engine and all connections."""
        if self._engine is None:
            logger.warning("Database engine not initialized, nothing to close")
            return

        logger.info("Closing database connection pool...")
        await self._engine.dispose()
        self._engine = None
        logger.info("Database connection pool closed")

    @property
    def engine(self) -> Optional[AsyncEngine]:
        return self._engine

    @property
    def is_initialized(self) -> bool:
        return self._engine is not None


# Global database connection manager instance
db_manager = DatabaseConnectionManager()


async def init_database() -> None:
    """Initialize the global database connection manager."""
    try:
        await db_manager.initialize()
        if get_settings().is_sqlite:
            await db_manager.create_all()
    except Exception as e:
        logger.error(f"❌ Database initialization failed: {e}", exc_info=True)
        raise


async def close_database() -> None:
    """Close the global database connection manager."""
    await db_manager.close()


def get_database_engine() -> AsyncEngine:
    """
    Get the database engine instance.

    Raises:
        RuntimeError: If database is not initialized
    """
    if not db_manager.is_initialized:
        raise RuntimeError("Database not initialized. Call init_database() first.")

    return db_manager.engine


async def database_health_check() -> Dict[str, Any]:
    return await db_manager.health_check()
