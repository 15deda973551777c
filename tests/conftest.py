"""
Shared test fixtures for the plant tracker API test suite.

Provides:
- In-memory SQLite database (aiosqlite) with all tables created
- An async SQLAlchemy session for service-level tests
- An httpx client bound to the FastAPI app, with Supabase token
  verification replaced by a fake verifier

Tokens understood by the fake verifier look like ``token-<name>`` and
resolve to the identity ``auth-<name>`` / ``<name>@example.com``.
"""

import os

# Settings are cached on first import, so the environment goes first
os.environ["ENVIRONMENT"] = "test"
os.environ["SUPABASE_URL"] = "https://test-project.supabase.co"
os.environ["SUPABASE_ANON_KEY"] = "test-anon-key"
os.environ["SUPABASE_JWT_SECRET"] = "test-jwt-secret"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["LOG_FORMAT"] = "text"

import logging  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.main import app  # noqa: E402
from app.modules.user_management.domain.models.user import AuthIdentity  # noqa: E402
from app.modules.user_management.domain.services.auth_service import TokenVerifier  # noqa: E402
from app.modules.user_management.presentation.dependencies import get_token_verifier  # noqa: E402
from app.shared.config.database import DatabaseBase  # noqa: E402
from app.shared.core.exceptions import AuthenticationError  # noqa: E402
from app.shared.infrastructure.database.connection import db_manager  # noqa: E402
from app.shared.infrastructure.database.session import initialize_sessions  # noqa: E402

# ---------------------------------------------------------------------------
# Logging: keep test output clean
# ---------------------------------------------------------------------------
logging.getLogger("app").setLevel(logging.WARNING)


class FakeTokenVerifier(TokenVerifier):
    """Accepts ``token-<name>`` and rejects everything else."""

    async def verify_token(self, token: str) -> AuthIdentity:
        if not token.startswith("token-"):
            raise AuthenticationError("Invalid authentication token")
        name = token[len("token-"):]
        return AuthIdentity(auth_id=f"auth-{name}", email=f"{name}@example.com")


# ========================== Database Fixtures ==============================


@pytest.fixture()
async def engine():
    """Fresh in-memory database per test with every table created."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(DatabaseBase.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture()
async def session(engine):
    factory = async_sessionmaker(engine, expire_on_commit=False)
    async with factory() as session:
        yield session


# ============================ API Fixtures =================================


@pytest.fixture()
async def client(engine):
    """HTTP client against the app, wired to the test database."""
    await db_manager.initialize(engine)
    initialize_sessions(engine)
    app.dependency_overrides[get_token_verifier] = FakeTokenVerifier

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
    await db_manager.close()


@pytest.fixture()
def alice():
    return {"Authorization": "Bearer token-alice"}


@pytest.fixture()
def bob():
    return {"Authorization": "Bearer token-bob"}
