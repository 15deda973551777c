# 📄 File: app/shared/config/database.py
#
# 🧭 Purpose (Layman Explanation):
# Describes how the plant tracker talks to its database: which connection options
# to use in each environment and the shared blueprint every table is built from.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy declarative base with a constraint naming convention (so Alembic
# autogenerates stable names) and environment-aware engine keyword arguments
# for PostgreSQL (asyncpg) with a SQLite (aiosqlite) fallback for local tests.
#
# 🔗 Dependencies:
# - SQLAlchemy 2.x declarative ORM
# - app.shared.config.settings
#
# 🔄 Connected Modules / Calls From:
# - app.shared.infrastructure.database.connection (engine creation)
# - All module SQLAlchemy models (DatabaseBase)
# - migrations/env.py (target_metadata)

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

    Provides the shared metadata so every table of the plant tracker
    (users, plants, care logs, reminders, recommendations) lands in one
    schema for migrations and test fixtures.
    """
    metadata = metadata


# =============================================================================
# ENGINE CONFIGURATION
# =============================================================================

def is_sqlite_url(url: str) -> bool:
    return url.startswith("sqlite")


def build_engine_kwargs(settings: Settings) -> Dict[str, Any]:
    """
    Get SQLAlchemy engine configuration based on environment.

    Args:
        settings: Application settings

    Returns:
        Keyword arguments for ``create_async_engine``
    """
    url = settings.database_url
    base_config: Dict[str, Any] = {
        "url": url,
        "echo": settings.DEBUG and settings.is_development,
    }

    if is_sqlite_url(url):
        # SQLite has no server-side pool or server settings
        base_config["poolclass"] = NullPool
        return base_config

    base_config["connect_args"] = {
        "server_settings": {
            "application_name": f"plant_tracker_{settings.ENVIRONMENT}",
            "jit": "off",
        },
        "command_timeout": 60,
    }

    if settings.is_testing:
        base_config["poolclass"] = NullPool
    else:
        base_config.update({
            "pool_size": settings.DB_POOL_SIZE,
            "max_overflow": settings.DB_MAX_OVERFLOW,
            "pool_timeout": settings.DB_POOL_TIMEOUT,
            "pool_recycle": settings.DB_POOL_RECYCLE,
            "pool_pre_ping": True,
        })

        if settings.is_production:
            base_config["connect_args"]["server_settings"].update({
                "timezone": "UTC",
                "statement_timeout": "300000",
                "idle_in_transaction_session_timeout": "300000",
            })

    return base_config
