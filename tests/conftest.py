# 📄 File: tests/conftest.py
# 🧭 Purpose (Layman Explanation):
# Prepares a throwaway database and a fake web client for every test, so tests
# never touch real data or real outside services.
#
# 🧪 Purpose (Technical Summary):
# Test environment variables, a file-backed SQLite engine per test (NullPool,
# tables from DatabaseBase metadata), a session manager bound to it and a
# FastAPI TestClient whose get_db_session dependency uses that manager.
#
# 🔗 Dependencies:
# - pytest, fastapi.testclient, sqlalchemy async, aiosqlite
#
# 🔄 Connected Modules / Calls From:
# - Every test module

import asyncio
import os

# Settings are cached on first use; configure the environment before app imports
os.environ["ENVIRONMENT"] = "test"
os.environ["LOG_FORMAT"] = "text"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./test_garden_planner.db"
os.environ["WEATHER_API_KEY"] = "test-weather-key"
os.environ["OPENAI_API_KEY"] = ""
os.environ["UNSPLASH_ACCESS_KEY"] = ""
os.environ["PLANT_API_KEY"] = ""

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from app.main import app  # noqa: E402
from app.shared.config.database import DatabaseBase  # noqa: E402
from app.shared.infrastructure.database.connection import create_engine_for_url  # noqa: E402
from app.shared.infrastructure.database.session import DatabaseSessionManager, get_db_session  # noqa: E402


def _run(coro):
    """Run a coroutine to completion on a fresh event loop."""
    return asyncio.run(coro)


@pytest.fixture
def engine(tmp_path):
    engine = create_engine_for_url(f"sqlite+aiosqlite:///{tmp_path / 'garden.db'}")

    async def create_tables():
        async with engine.begin() as conn:
            await conn.run_sync(DatabaseBase.metadata.create_all)

    _run(create_tables())
    yield engine
    _run(engine.dispose())


@pytest.fixture
def session_manager(engine):
    manager = DatabaseSessionManager()
    manager.initialize(engine)
    return manager


@pytest.fixture
def in_session(session_manager):
    """
    Run ``fn(session)`` inside one committed unit of work.

    Usage:
        plan = in_session(lambda s: GardenPlanRepositoryImpl(s).create(model))
    """

    def run(fn):
        async def go():
            async with session_manager.get_session() as session:
                return await fn(session)

        return _run(go())

    return run


@pytest.fixture
def client(session_manager):
    async def override_get_db_session():
        async with session_manager.get_session() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session
    # no context manager: the lifespan (real database startup) is skipped
    test_client = TestClient(app)
    yield test_client
    app.dependency_overrides.clear()
