# 📄 File: app/shared/infrastructure/database/session.py
#
# 🧭 Purpose (Layman Explanation):
# Manages database sessions (like conversations with the database) ensuring each request
# gets its own clean session, and that half-finished changes are undone when something fails.
#
# 🧪 Purpose (Technical Summary):
# Async SQLAlchemy session management with a FastAPI dependency, commit-on-success /
# rollback-on-error transaction handling, and translation of driver errors into
# application DatabaseError / ValidationError.
#
# 🔗 Dependencies:
# - sqlalchemy.ext.asyncio (AsyncSession, async_sessionmaker)
# - app/shared/infrastructure/database/connection.py (database engine)
# - app/shared/core/exceptions.py
#
# 🔄 Connected Modules / Calls From:
# - Every presentation/dependencies.py module (repository wiring)
# - app/main.py (startup initialization)

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import exc
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from app.shared.core.exceptions import DatabaseError, PlantCareException, domain_validation_error
from app.shared.infrastructure.database.connection import get_database_engine

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """
    Manages database sessions with transaction handling and automatic cleanup.
    """

    def __init__(self):
        self._session_factory: Optional[async_sessionmaker[AsyncSession]] = None

    def initialize(self, engine: Optional[AsyncEngine] = None) -> None:
        """Initialize the session factory with database engine."""
        try:
            bind = engine or get_database_engine()
            self._session_factory = async_sessionmaker(
                bind,
                class_=AsyncSession,
                expire_on_commit=False,  # Keep objects accessible after commit
                autoflush=True,
            )
            logger.info("Database session factory initialized successfully")

        except Exception as e:
            logger.error(f"Failed to initialize database session factory: {e}")
            raise DatabaseError(f"Session initialization failed: {e}")

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Get an async database session with automatic transaction management.

        Application errors (not found, forbidden, ...) and framework errors
        (request validation, HTTP errors, rate limits) roll back and propagate
        unchanged so the API can render them with their own status code.

        Yields:
            AsyncSession: Database session

        Raises:
            DatabaseError: If the database rejects the work
            ValidationError: If a domain model rejects the data
        """
        if self._session_factory is None:
            raise DatabaseError("Session manager not initialized")

        session: AsyncSession = self._session_factory()

        try:
            yield session
            await session.commit()
            logger.debug("Database transaction committed successfully")

        except PlantCareException:
            await session.rollback()
            raise

        except exc.SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"Database error occurred, transaction rolled back: {e}")
            raise DatabaseError(f"Database operation failed: {e}")

        except PydanticValidationError as e:
            await session.rollback()
            raise domain_validation_error(e) from e

        except Exception:
            await session.rollback()
            logger.debug("Transaction rolled back after an unhandled exception")
            raise

        finally:
            await session.close()

    @property
    def is_initialized(self) -> bool:
        """Check if session manager is initialized."""
        return self._session_factory is not None


# Global session manager instance
session_manager = DatabaseSessionManager()


def initialize_sessions(engine: Optional[AsyncEngine] = None) -> None:
    """Initialize the global database session manager."""
    session_manager.initialize(engine)


# FastAPI dependency for getting database sessions
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides database sessions.

    Usage:
        @router.post("/plants")
        async def create_plant(
            data: PlantCreateRequest,
            db: AsyncSession = Depends(get_db_session)
        ):
            ...

    Yields:
        AsyncSession: Database session
    """
    async with session_manager.get_session() as session:
        yield session


@asynccontextmanager
async def database_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Context manager for manual database session management
    outside of FastAPI route handlers.

    Example:
        async with database_session() as db:
            plant = await PlantRepositoryImpl(db).get_by_id(plant_id)
    """
    async with session_manager.get_session() as session:
        yield session
