# 📄 File: app/modules/user_management/infrastructure/database/user_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# This file handles all database operations for user accounts, like creating new users
# and finding existing ones by their login id, email or username.
#
# 🧪 Purpose (Technical Summary):
# Concrete implementation of UserRepository using async SQLAlchemy,
# mapping between domain User entities and UserModel rows with error translation.
#
# 🔗 Dependencies:
# - app.modules.user_management.domain (interface and model)
# - app.modules.user_management.infrastructure.database.models (UserModel)
# - SQLAlchemy async session and query operations
#
# 🔄 Connected Modules / Calls From:
# - app.modules.user_management.presentation.dependencies (repository wiring)

import logging
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.user_management.domain.models.user import User
from app.modules.user_management.domain.repositories.user_repository import UserRepository
from app.modules.user_management.infrastructure.database.models import UserModel
from app.shared.core.exceptions import DuplicateResourceError, NotFoundError, RepositoryError
from app.shared.utils.helpers import ensure_utc

logger = logging.getLogger(__name__)


class UserRepositoryImpl(UserRepository):
    """
    SQLAlchemy implementation of the UserRepository interface.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize the user repository.

        Args:
            session: SQLAlchemy async session for database operations
        """
        self._session = session

    async def create(self, user: User) -> User:
        """
        Create a new user in the database.

        Args:
            user: Domain User entity to create

        Returns:
            User: Created user entity with generated ID

        Raises:
            DuplicateResourceError: If a unique field is already taken
            RepositoryError: For other database errors
        """
        try:
            user_model = self._domain_to_model(user)

            self._session.add(user_model)
            await self._session.flush()  # Get the generated ID

            logger.info(f"Created user with ID: {user_model.id}")
            return self._model_to_domain(user_model)

        except IntegrityError as e:
            logger.warning(f"User creation failed - duplicate identity for {user.username}")
            raise DuplicateResourceError(
                "User already exists",
                resource_type="user",
                field="username",
                value=user.username,
            ) from e

        except SQLAlchemyError as e:
            logger.error(f"Database error during user creation: {str(e)}")
            raise RepositoryError(f"Failed to create user: {str(e)}", operation="create", entity="user") from e

    async def get_by_id(self, user_id: int) -> Optional[User]:
        return await self._get_one(UserModel.id == user_id)

    async def get_by_auth_id(self, supabase_auth_id: str) -> Optional[User]:
        return await self._get_one(UserModel.supabase_auth_id == supabase_auth_id)

    async def get_by_email(self, email: str) -> Optional[User]:
        return await self._get_one(func.lower(UserModel.email) == email.strip().lower())

    async def get_by_username(self, username: str) -> Optional[User]:
        return await self._get_one(UserModel.username == username)

    async def update(self, user: User) -> User:
        """
        Persist changes to an existing user.

        Raises:
            NotFoundError: If the user row does not exist
            RepositoryError: If the update fails
        """
        try:
            user_model = await self._session.get(UserModel, user.id)
            if user_model is None:
                raise NotFoundError("User not found", resource_type="user", resource_id=user.id)

            user_model.supabase_auth_id = user.supabase_auth_id
            user_model.username = user.username
            user_model.email = user.email
            await self._session.flush()

            logger.debug(f"Updated user: {user.id}")
            return self._model_to_domain(user_model)

        except SQLAlchemyError as e:
            logger.error(f"Database error updating user {user.id}: {str(e)}")
            raise RepositoryError(f"Failed to update user: {str(e)}", operation="update", entity="user") from e

    # =========================================================================
    # HELPERS
    # =========================================================================

    async def _get_one(self, condition) -> Optional[User]:
        try:
            result = await self._session.execute(select(UserModel).where(condition))
            user_model = result.scalar_one_or_none()
            return self._model_to_domain(user_model) if user_model else None

        except SQLAlchemyError as e:
            logger.error(f"Database error retrieving user: {str(e)}")
            raise RepositoryError(f"Failed to retrieve user: {str(e)}", operation="get", entity="user") from e

    @staticmethod
    def _domain_to_model(user: User) -> UserModel:
        return UserModel(
            id=user.id,
            supabase_auth_id=user.supabase_auth_id,
            username=user.username,
            email=user.email,
            created_at=user.created_at,
        )

    @staticmethod
    def _model_to_domain(model: UserModel) -> User:
        return User(
            id=model.id,
            supabase_auth_id=model.supabase_auth_id,
            username=model.username,
            email=model.email,
            created_at=ensure_utc(model.created_at),
        )
