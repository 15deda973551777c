# 📄 File: app/modules/user_management/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# Provides the "who is asking?" check used by every protected endpoint: it reads the
# login token from the request and hands back the matching plant tracker user.
# 🧪 Purpose (Technical Summary):
# FastAPI dependencies wiring the user repository, UserService, the Supabase token
# verifier and AuthService, plus ``get_current_user`` which authenticates the bearer
# token and binds the user to the request log context.
# 🔗 Dependencies:
# FastAPI, app.shared.infrastructure.database.session, user_management domain/infrastructure
# 🔄 Connected Modules / Calls From:
# Every presentation router (plants, care logs, reminders, recommendations, users)

import logging
from functools import lru_cache
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.user_management.domain.models.user import User
from app.modules.user_management.domain.repositories.user_repository import UserRepository
from app.modules.user_management.domain.services.auth_service import AuthService, TokenVerifier
from app.modules.user_management.domain.services.user_service import UserService
from app.modules.user_management.infrastructure.database.user_repository_impl import UserRepositoryImpl
from app.modules.user_management.infrastructure.external.supabase_auth import SupabaseAuthService
from app.shared.infrastructure.database.session import get_db_session
from app.shared.utils.logging import bind_user

logger = logging.getLogger(__name__)

# auto_error=False so a missing header is reported in the app's own error envelope
bearer_scheme = HTTPBearer(auto_error=False, description="Supabase access token")


# =========================================================================
# SERVICE WIRING
# =========================================================================

def get_user_repository(session: AsyncSession = Depends(get_db_session)) -> UserRepository:
    return UserRepositoryImpl(session)


def get_user_service(user_repository: UserRepository = Depends(get_user_repository)) -> UserService:
    return UserService(user_repository)


@lru_cache()
def get_token_verifier() -> TokenVerifier:
    """Get the process-wide Supabase token verifier."""
    return SupabaseAuthService()


def get_auth_service(
    token_verifier: TokenVerifier = Depends(get_token_verifier),
    user_service: UserService = Depends(get_user_service),
) -> AuthService:
    return AuthService(token_verifier, user_service)


# =========================================================================
# CORE AUTHENTICATION DEPENDENCIES
# =========================================================================

async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth_service: AuthService = Depends(get_auth_service),
) -> User:
    """
    Authenticate the request's bearer token and return the current user.

    Args:
        request: Incoming request (the user is stored on ``request.state``)
        credentials: Parsed ``Authorization: Bearer`` header, if present
        auth_service: Authentication service

    Returns:
        User: The authenticated (and, on first sign-in, provisioned) user

    Raises:
        AuthenticationError: If the token is missing or invalid
    """
    token = credentials.credentials if credentials else None
    user = await auth_service.authenticate(token)

    request.state.user = user
    bind_user(user.id)
    logger.debug(f"Authenticated user {user.id}")
    return user
