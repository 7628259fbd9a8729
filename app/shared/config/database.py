# 📄 File: app/shared/config/database.py
#
# 🧭 Purpose (Layman Explanation):
# Describes how the app talks to its database: the shared blueprint every table
# is built from and the connection options for each environment.
#
# 🧪 Purpose (Technical Summary):
# Declarative base with a constraint naming convention, plus async engine
# keyword arguments for PostgreSQL (pooled) and SQLite (tests, local runs).
#
# 🔗 Dependencies:
# - sqlalchemy (DeclarativeBase, MetaData, pools)
# - app.shared.config.settings
#
# 🔄 Connected Modules / Calls From:
# - app.shared.infrastructure.database.connection (engine creation)
# - All module ORM models (DatabaseBase)
# - migrations/env.py (target metadata)

from datetime import datetime, timezone
from typing import Any, Dict

from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import NullPool

from .settings import Settings


# =============================================================================
# DATABASE MODELS BASE CLASS
# =============================================================================

# Naming convention for database constraints
convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s"
}

metadata = MetaData(naming_convention=convention)


class DatabaseBase(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Shares one metadata object (and naming convention) across modules so
    Alembic sees every table.
    """
    metadata = metadata


def utc_now() -> datetime:
    """Python-side timestamp default; keeps values loaded after flush."""
    return datetime.now(timezone.utc)


# =============================================================================
# ENGINE CONFIGURATION
# =============================================================================

def engine_kwargs(settings: Settings, url: str) -> Dict[str, Any]:
    """
    Get SQLAlchemy engine configuration for the given URL.

    SQLite gets a NullPool so every checkout opens a fresh connection on the
    running event loop; PostgreSQL gets the configured queue pool.
    """
    if url.startswith("sqlite"):
        return {
            "echo": settings.DEBUG and settings.is_development,
            "poolclass": NullPool,
        }

    return {
        "echo": settings.DEBUG and settings.is_development,
        "pool_pre_ping": True,
        "pool_size": settings.DB_POOL_SIZE,
        "max_overflow": settings.DB_MAX_OVERFLOW,
        "pool_timeout": settings.DB_POOL_TIMEOUT,
        "pool_recycle": settings.DB_POOL_RECYCLE,
        "connect_args": {
            "server_settings": {
                "application_name": "garden_planner_backend",
                "jit": "off",
            },
            "command_timeout": 60,
        },
    }
