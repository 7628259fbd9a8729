# 📄 File: migrations/env.py
# 🧭 Purpose (Layman Explanation):
# Configuration file that tells Alembic how to connect to the database and
# run migrations safely, handling different environments like development and production.
# 🧪 Purpose (Technical Summary):
# Alembic environment configuration for database migrations, handling async connections,
# model imports, and environment-specific settings for the Garden Planner application.
# 🔗 Dependencies:
# - alembic (migration tool)
# - SQLAlchemy (ORM, async engine)
# - asyncpg / aiosqlite (async drivers)
# - python-dotenv (environment variables)
# 🔄 Connected Modules / Calls From:
# - alembic CLI commands (upgrade, downgrade, revision)
# - Development and production deployment

import asyncio
import os
import sys
from logging.config import fileConfig

from alembic import context
from dotenv import load_dotenv
from sqlalchemy import pool
from sqlalchemy.ext.asyncio import async_engine_from_config

# Load environment variables
load_dotenv()

# Add the project root to Python path
sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from app.shared.config.database import DatabaseBase  # noqa: E402
from app.shared.config.settings import get_settings  # noqa: E402

# Import all module models so they register on the shared metadata
from app.modules.plant_library.infrastructure.database.models import PlantsLibraryModel  # noqa: E402,F401
from app.modules.garden_planning.infrastructure.database.models import (  # noqa: E402,F401
    GardenPlanModel,
    PlantModel,
)
from app.modules.user_management.infrastructure.database.models import ProfileModel  # noqa: E402,F401
from app.modules.community.infrastructure.database.models import (  # noqa: E402,F401
    GardenImageModel,
    ImageCommentModel,
    ImageLikeModel,
)
from app.modules.care_management.infrastructure.database.models import PlantReminderModel  # noqa: E402,F401
from app.modules.health_monitoring.infrastructure.database.models import (  # noqa: E402,F401
    PestModel,
    PlantDiseaseModel,
)
from app.modules.activities.infrastructure.database.models import ActivityModel  # noqa: E402,F401

# This is the Alembic Config object
config = context.config

# Interpret the config file for Python logging
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

# Set the target metadata for 'autogenerate' support
target_metadata = DatabaseBase.metadata

exclude_tables = config.get_main_option("exclude_tables", "")


def get_database_url() -> str:
    """
    Get the async database URL from application settings.

    Returns:
        str: Database connection URL
    """
    return get_settings().database_url


def include_object(object, name, type_, reflected, compare_to):
    """
    Filter objects to include in migrations.

    Tables listed in the ``exclude_tables`` option are skipped.
    """
    if type_ == "table" and name in exclude_tables.split(","):
        return False
    return True


def run_migrations_offline() -> None:
    """
    Run migrations in 'offline' mode.

    Configures the context with just a URL and emits SQL to the script output.
    """
    url = get_database_url()
    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        compare_type=True,
        include_object=include_object,
        render_as_batch=url.startswith("sqlite"),
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection) -> None:
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        compare_type=True,
        include_object=include_object,
        # SQLite cannot ALTER most constraints in place
        render_as_batch=connection.dialect.name == "sqlite",
    )

    with context.begin_transaction():
        context.run_migrations()


async def run_async_migrations() -> None:
    """
    Run migrations through the application's async driver.
    """
    configuration = config.get_section(config.config_ini_section) or {}
    configuration["sqlalchemy.url"] = get_database_url()

    connectable = async_engine_from_config(
        configuration,
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    async with connectable.connect() as connection:
        await connection.run_sync(do_run_migrations)

    await connectable.dispose()


def run_migrations_online() -> None:
    asyncio.run(run_async_migrations())


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
