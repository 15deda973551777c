# 📄 File: migrations/env.py
# 🧭 Purpose (Layman Explanation):
# Tells Alembic how to connect to the database and run migrations safely, so the tables
# for users, plants, care logs, reminders and recommendations are created the same way everywhere.
# 🧪 Purpose (Technical Summary):
# Alembic environment configuration: loads .env, registers every module's SQLAlchemy models
# on DatabaseBase.metadata and runs migrations online (sync or async) or offline.
# 🔗 Dependencies:
# - alembic (migration tool)
# - SQLAlchemy (ORM)
# - asyncpg (PostgreSQL async driver)
# - python-dotenv (environment variables)
# 🔄 Connected Modules / Calls From:
# - alembic CLI commands (upgrade, downgrade, revision)

import asyncio
import os
import sys
from logging.config import fileConfig

from alembic import context
from dotenv import load_dotenv
from sqlalchemy import engine_from_config, pool
from sqlalchemy.ext.asyncio import async_engine_from_config

# Load environment variables
load_dotenv()

# Add the project root to Python path
sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from app.shared.config.database import DatabaseBase  # noqa: E402

# Import all module models so they are registered for autogenerate
from app.modules.user_management.infrastructure.database.models import UserModel  # noqa: E402,F401
from app.modules.plant_management.infrastructure.database.models import PlantModel  # noqa: E402,F401
from app.modules.care_management.infrastructure.database.models import (  # noqa: E402,F401
    CareLogModel,
    ReminderModel,
)
from app.modules.recommendations.infrastructure.database.models import RecommendationModel  # noqa: E402,F401

# This is the Alembic Config object
config = context.config

# Interpret the config file for Python logging
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

# Set the target metadata for 'autogenerate' support
target_metadata = DatabaseBase.metadata

exclude_tables = config.get_main_option("exclude_tables", "") or ""

# Supabase keeps its own tables in these schemas
SUPABASE_SCHEMAS = {"auth", "storage", "realtime", "vault", "extensions"}


def get_database_url(async_driver: bool = False) -> str:
    """
    Get database URL from environment variables.

    Args:
        async_driver: Keep the async driver in the URL

    Returns:
        str: Database connection URL
    """
    database_url = os.getenv("DATABASE_URL")

    if not database_url:
        db_host = os.getenv("DB_HOST", "localhost")
        db_port = os.getenv("DB_PORT", "5432")
        db_user = os.getenv("DB_USER", "postgres")
        db_password = os.getenv("DB_PASSWORD", "")
        db_name = os.getenv("DB_NAME", "plant_tracker")
        database_url = f"postgresql+asyncpg://{db_user}:{db_password}@{db_host}:{db_port}/{db_name}"

    if not async_driver:
        database_url = database_url.replace("postgresql+asyncpg://", "postgresql://")
        database_url = database_url.replace("sqlite+aiosqlite://", "sqlite://")
    return database_url


def include_object(object, name, type_, reflected, compare_to):
    """
    Filter objects to include in migrations.

    Supabase-managed schemas and any table listed in ``exclude_tables``
    are left alone.
    """
    if getattr(object, "schema", None) in SUPABASE_SCHEMAS:
        return False

    if type_ == "table" and name in exclude_tables.split(","):
        return False

    return True


def run_migrations_offline() -> None:
    """
    Run migrations in 'offline' mode.

    Calls to context.execute() here emit the given string to the script output.
    """
    context.configure(
        url=get_database_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        compare_type=True,
        include_object=include_object,
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection) -> None:
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        compare_type=True,
        include_object=include_object,
        render_as_batch=connection.dialect.name == "sqlite",
    )

    with context.begin_transaction():
        context.run_migrations()


async def run_async_migrations() -> None:
    """
    Run migrations in async mode for async database connections.
    """
    configuration = config.get_section(config.config_ini_section) or {}
    configuration["sqlalchemy.url"] = get_database_url(async_driver=True)

    connectable = async_engine_from_config(
        configuration,
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    async with connectable.connect() as connection:
        await connection.run_sync(do_run_migrations)

    await connectable.dispose()


def run_migrations_online() -> None:
    """
    Run migrations in 'online' mode.
    """
    if os.getenv("ALEMBIC_ASYNC", "false").lower() == "true":
        asyncio.run(run_async_migrations())
        return

    configuration = config.get_section(config.config_ini_section) or {}
    configuration["sqlalchemy.url"] = get_database_url()

    connectable = engine_from_config(
        configuration,
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    with connectable.connect() as connection:
        do_run_migrations(connection)


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
