# 📄 File: app/main.py
#
# 🧭 Purpose (Layman Explanation):
# The main control center that starts the plant tracker, connects all the parts together,
# and makes sure everything is ready to handle requests from the app.
#
# 🧪 Purpose (Technical Summary):
# FastAPI application factory and entry point: logging setup, database and session
# initialization in the lifespan, middleware stack, exception handlers, slowapi limiter
# registration and router mounting.
#
# 🔗 Dependencies:
# - FastAPI framework, uvicorn, slowapi
# - app.shared.config.settings
# - app.shared.infrastructure.database (connection and sessions)
# - app.api (middleware, v1 router, health)
#
# 🔄 Connected Modules / Calls From:
# - uvicorn server startup
# - Docker container entry point
# - tests (create_application)

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.middleware.error_handling import (
    ErrorHandlingMiddleware,
    http_exception_handler,
    plantcare_exception_handler,
    rate_limit_exceeded_handler,
    validation_exception_handler,
)
from app.api.middleware.logging import RequestLoggingMiddleware
from app.api.v1.health import health_router
from app.api.v1.router import api_v1_router
from app.shared.config.settings import get_settings
from app.shared.core.exceptions import PlantCareException
from app.shared.core.rate_limiter import limiter
from app.shared.infrastructure.database.connection import close_database, db_manager, initialize_database
from app.shared.infrastructure.database.session import initialize_sessions
from app.shared.utils.logging import setup_logging

# Get application settings
settings = get_settings()

setup_logging(
    log_level=settings.LOG_LEVEL,
    log_format=settings.LOG_FORMAT,
    log_file=settings.LOG_FILE,
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Opens the database engine and session factory on startup and disposes
    the engine on shutdown.
    """
    logger.info("🌱 Plant Care Tracker starting up...")

    await initialize_database()
    initialize_sessions()
    logger.info("✅ Session manager initialized")

    if settings.is_development:
        # Migrations own the schema elsewhere
        await db_manager.create_tables()

    logger.info("✅ Plant Care Tracker startup complete")
    try:
        yield
    finally:
        logger.info("🔄 Plant Care Tracker shutting down...")
        await close_database()
        logger.info("✅ Plant Care Tracker shutdown complete")


def create_application() -> FastAPI:
    """
    Application factory function.

    Creates and configures the FastAPI application with all necessary
    middleware, routers, and settings based on the current environment.

    Returns:
        FastAPI: Configured FastAPI application instance
    """
    app = FastAPI(
        title=settings.APP_NAME,
        description=settings.APP_DESCRIPTION,
        version=settings.APP_VERSION,
        docs_url="/docs" if settings.ENABLE_SWAGGER_UI else None,
        redoc_url="/redoc" if settings.ENABLE_REDOC else None,
        lifespan=lifespan,
        debug=settings.DEBUG,
    )

    # =========================================================================
    # RATE LIMITING
    # =========================================================================

    app.state.limiter = limiter

    # =========================================================================
    # MIDDLEWARE CONFIGURATION (last added runs first)
    # =========================================================================

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(ErrorHandlingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "X-Response-Time"],
    )

    # =========================================================================
    # EXCEPTION HANDLERS
    # =========================================================================

    app.add_exception_handler(PlantCareException, plantcare_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    # =========================================================================
    # ROUTER REGISTRATION
    # =========================================================================

    app.include_router(health_router)
    app.include_router(api_v1_router, prefix="/api/v1")

    @app.get("/", include_in_schema=False)
    async def root() -> dict:
        """Root endpoint with API information."""
        return {
            "name": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "description": settings.APP_DESCRIPTION,
            "docs_url": "/docs" if settings.ENABLE_SWAGGER_UI else None,
            "health_check": "/health",
            "api_base": "/api/v1",
        }

    @app.get("/favicon.ico", include_in_schema=False)
    async def favicon():
        return Response(status_code=204)

    return app


# Create the FastAPI application
app = create_application()


def main():
    """
    Run the application with uvicorn (``python -m app.main``).
    """
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD and settings.is_development,
        log_level=settings.LOG_LEVEL.lower(),
        workers=1 if settings.RELOAD else settings.WORKERS,
    )


if __name__ == "__main__":
    main()
