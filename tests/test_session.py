"""
Unit of work tests: what the session manager commits, rolls back, translates
and lets through unchanged.
"""

import asyncio
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest
from fastapi import HTTPException
from fastapi.exceptions import RequestValidationError
from sqlalchemy import func, select, text
from sqlalchemy.exc import OperationalError

from app.modules.garden_planning.infrastructure.database.models import GardenPlanModel
from app.shared.core.exceptions import DatabaseError, NotFoundError, TransactionError
from app.shared.infrastructure.database.session import DatabaseSessionManager


def _run(coro):
    return asyncio.run(coro)


def _plan():
    return GardenPlanModel(user_id=uuid4(), name="Herb Spiral", type="Herb")


def _plan_count(session_manager):
    async def count():
        async with session_manager.get_session() as session:
            return (await session.execute(select(func.count()).select_from(GardenPlanModel))).scalar_one()

    return _run(count())


def _raise_inside_session(session_manager, error):
    async def go():
        async with session_manager.get_session() as session:
            session.add(_plan())
            await session.flush()
            raise error

    _run(go())


def test_successful_unit_of_work_is_committed(session_manager, in_session):
    async def add(session):
        session.add(_plan())
        await session.flush()

    in_session(add)

    assert _plan_count(session_manager) == 1


@pytest.mark.parametrize("error", [
    RequestValidationError([{"loc": ("path", "plan_id"), "msg": "Input should be a valid UUID", "type": "uuid_parsing"}]),
    HTTPException(status_code=404),
    NotFoundError("Garden plan not found"),
    ValueError("boom"),
])
def test_caller_errors_roll_back_and_propagate_unchanged(session_manager, error):
    with pytest.raises(type(error)) as raised:
        _raise_inside_session(session_manager, error)

    assert raised.value is error
    assert _plan_count(session_manager) == 0


def test_statement_failure_becomes_database_error(session_manager):
    async def go():
        async with session_manager.get_session() as session:
            await session.execute(text("SELECT * FROM no_such_table"))

    with pytest.raises(DatabaseError):
        _run(go())


def test_commit_failure_becomes_transaction_error():
    session = MagicMock()
    session.commit = AsyncMock(side_effect=OperationalError("COMMIT", {}, Exception("disk I/O error")))
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    manager = DatabaseSessionManager()
    manager._session_factory = MagicMock(return_value=session)

    async def go():
        async with manager.get_session():
            pass

    with pytest.raises(TransactionError):
        _run(go())

    session.rollback.assert_awaited_once()
    session.close.assert_awaited_once()


def test_uninitialized_manager_is_a_database_error():
    async def go():
        async with DatabaseSessionManager().get_session():
            pass

    with pytest.raises(DatabaseError):
        _run(go())
