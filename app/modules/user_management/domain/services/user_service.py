# 📄 File: app/modules/user_management/domain/services/user_service.py
# 🧭 Purpose (Layman Explanation):
# Turns a person who just signed in with Supabase into a plant tracker user: finds their
# existing account, links an older account with the same email, or creates a new one.
# 🧪 Purpose (Technical Summary):
# Domain service implementing identity resolution and just-in-time user provisioning,
# including collision-free username generation.
# 🔗 Dependencies:
# User domain models, UserRepository, app.shared.utils (logging, helpers)
# 🔄 Connected Modules / Calls From:
# auth_service.py, presentation dependencies (get_current_user)

import logging
import string
from typing import Optional

from app.shared.utils.helpers import generate_random_string
from app.shared.utils.logging import get_logger

from ..models.user import AuthIdentity, User
from ..repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)
audit_logger = get_logger("user_management.audit")

USERNAME_SUFFIX_LENGTH = 5
USERNAME_ATTEMPTS = 5


class UserService:
    """
    Domain service for user management business logic.

    Resolution order for a verified identity:
    1. user already linked to the Supabase Auth id
    2. user with the same email, relinked to the new auth id
    3. freshly provisioned user
    """

    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    async def resolve_user(self, identity: AuthIdentity) -> User:
        """
        Resolve a verified identity into an application user.

        Args:
            identity: Identity verified by Supabase Auth

        Returns:
            The existing, relinked or newly created User
        """
        user = await self._user_repository.get_by_auth_id(identity.auth_id)
        if user:
            return user

        if identity.email:
            user = await self._user_repository.get_by_email(identity.email)
            if user:
                logger.info(f"Relinking user {user.id} to new Supabase identity")
                user.supabase_auth_id = identity.auth_id
                return await self._user_repository.update(user)

        username = await self.generate_username(identity.email, identity.auth_id)
        user = await self._user_repository.create(
            User(
                supabase_auth_id=identity.auth_id,
                username=username,
                email=identity.email,
            )
        )
        audit_logger.log_business_event(
            "user_provisioned",
            f"🌱 Provisioned user {user.username}",
            entity_id=user.id,
            entity_type="user",
        )
        return user

    async def generate_username(self, email: Optional[str], auth_id: str) -> str:
        """
        Derive a unique username for a new user.

        The email local part is preferred, falling back to ``user_<first 8 chars
        of the auth id>``. When the base name is taken a random 5-character
        lowercase alphanumeric suffix is appended (``name_ab12c``).

        Args:
            email: Email address from the identity, if any
            auth_id: Supabase Auth user id

        Returns:
            A username not used by any other user
        """
        base = email.split("@")[0] if email and email.split("@")[0] else f"user_{auth_id[:8]}"

        if await self._user_repository.get_by_username(base) is None:
            return base

        for _ in range(USERNAME_ATTEMPTS):
            candidate = f"{base}_{self._random_suffix()}"
            if await self._user_repository.get_by_username(candidate) is None:
                return candidate

        # Astronomically unlikely; widen the suffix instead of failing sign-in
        return f"{base}_{self._random_suffix(USERNAME_SUFFIX_LENGTH * 2)}"

    @staticmethod
    def _random_suffix(length: int = USERNAME_SUFFIX_LENGTH) -> str:
        return generate_random_string(
            length,
            custom_chars=string.ascii_lowercase + string.digits,
        )
