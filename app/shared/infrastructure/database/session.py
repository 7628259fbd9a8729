# 📄 File: app/shared/infrastructure/database/session.py
#
# 🧭 Purpose (Layman Explanation):
# Gives every request its own conversation with the database, saves the work
# when the request succeeds and undoes it when something fails.
#
# 🧪 Purpose (Technical Summary):
# Async SQLAlchemy session management: a session factory bound to the shared
# engine, a commit-or-rollback context manager and the FastAPI dependency
# used by every repository.
#
# 🔗 Dependencies:
# - sqlalchemy.ext.asyncio (AsyncSession, async_sessionmaker)
# - app/shared/infrastructure/database/connection.py (database engine)
#
# 🔄 Connected Modules / Calls From:
# - Module presentation dependencies (repository construction)
# - app/main.py (startup)

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from sqlalchemy import exc
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from app.shared.core.exceptions import DatabaseError, TransactionError
from app.shared.infrastructure.database.connection import get_database_engine

logger = logging.getLogger(__name__)


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker:
    """Session factory shared by the app and the test suite."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,  # Keep objects accessible after commit
        autoflush=True,
    )


class DatabaseSessionManager:
    """
    Manages database sessions with transaction handling and automatic cleanup.
    """

    def __init__(self):
        self._session_factory: Optional[async_sessionmaker] = None

    def initialize(self, engine: Optional[AsyncEngine] = None) -> None:
        """Bind the session factory to the database engine."""
        self._session_factory = build_session_factory(engine or get_database_engine())
        logger.info("Database session factory initialized successfully")

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Get an async database session with automatic transaction management.

        Anything raised by the caller (application errors, request validation
        errors, HTTP exceptions) rolls back and propagates unchanged so the
        API layer can map it. Only storage failures are translated.

        Raises:
            DatabaseError: If the session cannot be created or a statement fails
            TransactionError: If the final commit fails
        """
        if self._session_factory is None:
            raise DatabaseError("Session manager not initialized")

        session: AsyncSession = self._session_factory()

        try:
            try:
                yield session

            except exc.SQLAlchemyError as e:
                await session.rollback()
                logger.error(f"Database error occurred, transaction rolled back: {e}")
                raise DatabaseError("Database operation failed") from e

            except Exception:
                await session.rollback()
                raise

            try:
                await session.commit()
            except exc.SQLAlchemyError as e:
                await session.rollback()
                logger.error(f"Commit failed, transaction rolled back: {e}")
                raise TransactionError("Transaction failed") from e

        finally:
            await session.close()

    @property
    def is_initialized(self) -> bool:
        return self._session_factory is not None


# Global session manager instance
session_manager = DatabaseSessionManager()


def initialize_sessions() -> None:
    """Initialize the global database session manager."""
    session_manager.initialize()


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides database sessions.

    Usage:
        def get_profile_repository(
            session: AsyncSession = Depends(get_db_session),
        ) -> ProfileRepository:
            return ProfileRepositoryImpl(session)

    Yields:
        AsyncSession: Database session
    """
    async with session_manager.get_session() as session:
        yield session
