# 📄 File: app/modules/user_management/infrastructure/external/supabase_auth.py
# 🧭 Purpose (Layman Explanation):
# Asks Supabase (the sign-in service) whether the login token sent by the app is real,
# and if so, who it belongs to.
#
# 🧪 Purpose (Technical Summary):
# TokenVerifier implementation for Supabase Auth. With SUPABASE_JWT_SECRET configured
# tokens are verified locally (python-jose, HS256, audience check); otherwise the
# supabase client's ``auth.get_user`` is called in a worker thread.
#
# 🔗 Dependencies:
# - python-jose for JWT verification
# - supabase client (app.shared.config.supabase)
# - app.shared.core.exceptions
#
# 🔄 Connected Modules / Calls From:
# - app.modules.user_management.presentation.dependencies (get_current_user)

import logging
from typing import Any, Dict, Optional

from fastapi.concurrency import run_in_threadpool
from jose import ExpiredSignatureError, JWTError, jwt

from app.modules.user_management.domain.models.user import AuthIdentity
from app.modules.user_management.domain.services.auth_service import TokenVerifier
from app.shared.config.settings import Settings, get_settings
from app.shared.config.supabase import SupabaseManager, get_supabase_manager
from app.shared.core.exceptions import AuthenticationError, ExternalServiceError

logger = logging.getLogger(__name__)


class SupabaseAuthService(TokenVerifier):
    """
    Verifies Supabase Auth access tokens.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        supabase_manager: Optional[SupabaseManager] = None,
    ):
        self._settings = settings or get_settings()
        self._supabase_manager = supabase_manager

    async def verify_token(self, token: str) -> AuthIdentity:
        """
        Verify a Supabase access token.

        Args:
            token: Raw bearer token

        Returns:
            AuthIdentity: Verified auth id and email

        Raises:
            AuthenticationError: If the token is invalid or expired
            ExternalServiceError: If Supabase cannot be reached
        """
        if self._settings.uses_local_jwt_verification:
            return self._verify_locally(token)
        return await self._verify_remotely(token)

    # =========================================================================
    # LOCAL VERIFICATION
    # =========================================================================

    def _verify_locally(self, token: str) -> AuthIdentity:
        try:
            claims: Dict[str, Any] = jwt.decode(
                token,
                self._settings.SUPABASE_JWT_SECRET,
                algorithms=[self._settings.SUPABASE_JWT_ALGORITHM],
                audience=self._settings.SUPABASE_JWT_AUDIENCE,
            )
        except ExpiredSignatureError:
            logger.info("Rejected expired access token")
            raise AuthenticationError("Token has expired")
        except JWTError as e:
            logger.warning(f"JWT validation failed: {e}")
            raise AuthenticationError("Invalid authentication token")

        subject = claims.get("sub")
        if not subject:
            logger.warning("Token missing subject claim")
            raise AuthenticationError("Invalid authentication token")

        return AuthIdentity(auth_id=subject, email=claims.get("email"))

    # =========================================================================
    # REMOTE VERIFICATION
    # =========================================================================

    async def _verify_remotely(self, token: str) -> AuthIdentity:
        manager = self._supabase_manager or get_supabase_manager()
        auth_client = manager.get_auth_client()

        try:
            response = await run_in_threadpool(auth_client.get_user, token)
        except Exception as e:
            # gotrue API errors carry the HTTP status of the Auth server
            if getattr(e, "status", None) in (400, 401, 403):
                logger.info(f"Supabase rejected access token: {e}")
                raise AuthenticationError("Invalid authentication token")
            logger.error(f"Supabase Auth lookup failed: {e}")
            raise ExternalServiceError("Authentication service unavailable", service="supabase_auth")

        user = getattr(response, "user", None)
        if user is None or not getattr(user, "id", None):
            raise AuthenticationError("Invalid authentication token")

        return AuthIdentity(auth_id=str(user.id), email=getattr(user, "email", None))
