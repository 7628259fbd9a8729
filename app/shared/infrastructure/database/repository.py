# 📄 File: app/shared/infrastructure/database/repository.py
#
# 🧭 Purpose (Layman Explanation):
# The common toolkit each database "librarian" uses to fetch, store, page through and remove
# records, reporting a clear error when the database misbehaves.
#
# 🧪 Purpose (Technical Summary):
# Base class for SQLAlchemy repository implementations: session holder, SQLAlchemyError to
# RepositoryError translation and the get/add/flush/delete/page/list primitives.
#
# 🔗 Dependencies:
# - sqlalchemy (AsyncSession, select, func)
# - app.shared.infrastructure.database.search (pagination)
# - app.shared.core.exceptions (RepositoryError)
#
# 🔄 Connected Modules / Calls From:
# - Every module's *_repository_impl.py

import logging
from contextlib import asynccontextmanager
from typing import Any, List, Optional, Sequence

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.core.exceptions import RepositoryError
from app.shared.infrastructure.database.search import Page, PageRequest, paginate

logger = logging.getLogger(__name__)


class SQLAlchemyRepository:
    """
    Shared plumbing for repository implementations.

    Subclasses set ``model`` (ORM class) and ``entity_name`` (used in log
    and error messages).
    """

    model: Any = None
    entity_name: str = "entity"

    def __init__(self, session: AsyncSession):
        """
        Initialize the repository.

        Args:
            session: SQLAlchemy async session for database operations
        """
        self._session = session

    @asynccontextmanager
    async def _translate_errors(self, operation: str):
        """Re-raise SQLAlchemy failures as RepositoryError."""
        try:
            yield
        except SQLAlchemyError as e:
            logger.error(f"Database error during {self.entity_name} {operation}: {str(e)}")
            raise RepositoryError(
                f"Failed to {operation} {self.entity_name}",
                operation=operation,
            ) from e

    async def _get(self, entity_id) -> Optional[Any]:
        async with self._translate_errors("retrieve"):
            return await self._session.get(self.model, entity_id)

    async def _add(self, entity):
        async with self._translate_errors("create"):
            self._session.add(entity)
            await self._session.flush()

        logger.info(f"Created {self.entity_name} with ID: {entity.id}")
        return entity

    async def _flush(self, entity):
        async with self._translate_errors("update"):
            await self._session.flush()

        logger.info(f"Updated {self.entity_name}: {entity.id}")
        return entity

    async def _delete(self, entity_id) -> bool:
        async with self._translate_errors("delete"):
            entity = await self._session.get(self.model, entity_id)
            if entity is None:
                logger.debug(f"{self.entity_name} not found for deletion: {entity_id}")
                return False

            await self._session.delete(entity)
            await self._session.flush()

        logger.info(f"Deleted {self.entity_name}: {entity_id}")
        return True

    async def _page(self, where, page_request: PageRequest, order_first: Sequence[Any] = ()) -> Page:
        """Page of ``model`` rows matching ``where``."""
        async with self._translate_errors("search"):
            stmt = select(self.model).where(where)
            return await paginate(self._session, stmt, page_request, self.model, order_first)

    async def _list(self, where, *order_by) -> List[Any]:
        """Every ``model`` row matching ``where``."""
        async with self._translate_errors("list"):
            stmt = select(self.model).where(where)
            if order_by:
                stmt = stmt.order_by(*order_by)
            result = await self._session.execute(stmt)
            return list(result.scalars().all())

    async def _count(self, where) -> int:
        async with self._translate_errors("count"):
            stmt = select(func.count()).select_from(self.model).where(where)
            return (await self._session.execute(stmt)).scalar_one()
