# 📄 File: app/modules/user_management/domain/services/auth_service.py
# 🧭 Purpose (Layman Explanation):
# Checks the login token sent with each request and works out which plant tracker
# user is making the request.
# 🧪 Purpose (Technical Summary):
# Authentication domain service: delegates token verification to a TokenVerifier
# (Supabase Auth in production) and resolves the verified identity via UserService.
# 🔗 Dependencies:
# User domain models, UserService, app.shared.core.exceptions
# 🔄 Connected Modules / Calls From:
# presentation/dependencies.py (get_current_user)

from abc import ABC, abstractmethod
from typing import Optional

from app.shared.core.exceptions import AuthenticationError

from ..models.user import AuthIdentity, User
from .user_service import UserService


class TokenVerifier(ABC):
    """Verifies an access token issued by the identity provider."""

    @abstractmethod
    async def verify_token(self, token: str) -> AuthIdentity:
        """
        Verify a bearer token.

        Raises:
            AuthenticationError: If the token is invalid or expired
            ExternalServiceError: If the identity provider cannot be reached
        """
        pass


class AuthService:
    """Authenticates requests against the identity provider."""

    def __init__(self, token_verifier: TokenVerifier, user_service: UserService):
        self._token_verifier = token_verifier
        self._user_service = user_service

    async def authenticate(self, token: Optional[str]) -> User:
        """
        Authenticate a bearer token and return the application user.

        Args:
            token: Raw bearer token, or None when the header was absent

        Returns:
            The resolved application user

        Raises:
            AuthenticationError: If the token is missing or rejected
        """
        if not token:
            raise AuthenticationError("Unauthorized")

        identity = await self._token_verifier.verify_token(token)
        return await self._user_service.resolve_user(identity)
