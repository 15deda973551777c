# 📄 File: app/shared/infrastructure/database/connection.py
#
# 🧭 Purpose (Layman Explanation):
# Manages the connection to our database, making sure we can talk to the place where
# plants, care logs and reminders are stored, and that it is still answering.
#
# 🧪 Purpose (Technical Summary):
# Async SQLAlchemy engine lifecycle (initialize, dispose), health checks with
# retry/backoff, and connection pool statistics for the detailed health endpoint.
#
# 🔗 Dependencies:
# - sqlalchemy (async engine)
# - app/shared/config/settings.py and app/shared/config/database.py
# - asyncpg / aiosqlite drivers (selected by DATABASE_URL)
#
# 🔄 Connected Modules / Calls From:
# - app/shared/infrastructure/database/session.py (session factory)
# - app/main.py (startup / shutdown)
# - app/api/v1/health.py (database health monitoring)

import asyncio
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from app.shared.config.database import DatabaseBase, build_engine_kwargs
from app.shared.config.settings import get_settings

logger = logging.getLogger(__name__)


class DatabaseConnectionManager:
    """
    Manages database connections with connection pooling,
    health monitoring, and automatic retry logic.
    """

    def __init__(self):
        self._engine: Optional[AsyncEngine] = None
        self._health_check_query = text("SELECT 1")
        self._retry_attempts = 3
        self._retry_delay = 1.0

    async def initialize(self, engine: Optional[AsyncEngine] = None) -> None:
        """
        Initialize database engine with connection pooling.

        Args:
            engine: Pre-built engine to adopt instead of creating one from settings
        """
        if self._engine is not None:
            logger.warning("Database engine already initialized")
            return

        settings = get_settings()
        try:
            logger.info("Initializing database connection pool...")
            self._engine = engine or create_async_engine(**build_engine_kwargs(settings))

            health = await self.health_check()
            if health["status"] != "healthy":
                logger.warning(f"Database not reachable at startup: {health.get('error')}")

            logger.info(
                f"Database connection pool initialized "
                f"({self._engine.url.render_as_string(hide_password=True)})"
            )

        except Exception as e:
            logger.error(f"Failed to initialize database connection: {e}")
            raise

    async def create_tables(self) -> None:
        """Create all tables known to the ORM metadata (development convenience)."""
        if self._engine is None:
            raise RuntimeError("Database engine not initialized")
        async with self._engine.begin() as conn:
            await conn.run_sync(DatabaseBase.metadata.create_all)
        logger.info("Database tables ensured")

    async def health_check(self) -> Dict[str, Any]:
        """
        Perform database health check and return structured status.
        """
        if self._engine is None:
            logger.error("Database engine not initialized")
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

    def get_connection_info(self) -> Dict[str, Any]:
        """
        Get current connection pool information for monitoring.

        Returns:
            Dict containing pool statistics
        """
        if self._engine is None:
            return {"status": "not_initialized"}

        pool = self._engine.pool
        info: Dict[str, Any] = {"status": "initialized", "pool": type(pool).__name__}
        # NullPool (tests, SQLite) exposes no counters
        for name in ("size", "checkedin", "checkedout", "overflow"):
            counter = getattr(pool, name, None)
            if callable(counter):
                info[name] = counter()
        return info

    async def close(self) -> None:
        """Close database engine and all connections."""
        if self._engine is None:
            logger.warning("Database engine not initialized, nothing to close")
            return

        try:
            logger.info("Closing database connection pool...")
            await self._engine.dispose()
            self._engine = None
            logger.info("✅ Database connection pool closed successfully")

        except Exception as e:
            logger.error(f"❌ Error closing database connection pool: {e}")
            raise

    @property
    def engine(self) -> Optional[AsyncEngine]:
        """Get the SQLAlchemy async engine."""
        return self._engine

    @property
    def is_initialized(self) -> bool:
        """Check if database engine is initialized."""
        return self._engine is not None


# Global database connection manager instance
db_manager = DatabaseConnectionManager()


async def initialize_database() -> None:
    """Initialize the global database connection manager."""
    try:
        logger.info("Starting database initialization...")
        await db_manager.initialize()
        logger.info("✅ Database initialization completed successfully")
    except Exception as e:
        logger.error(f"❌ Failed to initialize database: {str(e)}", exc_info=True)
        raise


async def close_database() -> None:
    """Close the global database connection manager."""
    await db_manager.close()


def get_database_engine() -> AsyncEngine:
    """
    Get the database engine instance.

    Returns:
        AsyncEngine: SQLAlchemy async engine

    Raises:
        RuntimeError: If database is not initialized
    """
    if not db_manager.is_initialized:
        raise RuntimeError("Database not initialized. Call initialize_database() first.")

    return db_manager.engine


async def database_health_check() -> Dict[str, Any]:
    """Perform database health check."""
    return await db_manager.health_check()


def get_connection_info() -> Dict[str, Any]:
    """Get database connection pool information."""
    return db_manager.get_connection_info()
