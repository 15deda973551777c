# 📄 File: app/modules/user_management/domain/repositories/user_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines the contract for how to save and find users without saying which database is used.
# 🧪 Purpose (Technical Summary):
# Repository interface for User entities following the Repository pattern and
# dependency inversion principle.
# 🔗 Dependencies:
# Domain models (User), typing, abc
# 🔄 Connected Modules / Calls From:
# user_service.py, infrastructure implementation (user_repository_impl.py)

from abc import ABC, abstractmethod
from typing import Optional

from ..models.user import User


class UserRepository(ABC):
    """
    Repository interface for User entity data access operations.

    Implementation Notes:
    - Concrete implementations are in infrastructure layer
    - Methods return domain entities (User), not database models
    - All operations are async for non-blocking I/O
    """

    @abstractmethod
    async def create(self, user: User) -> User:
        """
        Create a new user.

        Args:
            user: User entity to create

        Returns:
            Created User entity with generated id populated

        Raises:
            DuplicateResourceError: If auth id, username or email already exists
            RepositoryError: If database operation fails
        """
        pass

    @abstractmethod
    async def get_by_id(self, user_id: int) -> Optional[User]:
        pass

    @abstractmethod
    async def get_by_auth_id(self, supabase_auth_id: str) -> Optional[User]:
        """Get the user linked to a Supabase Auth identity."""
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address (case-insensitive)."""
        pass

    @abstractmethod
    async def get_by_username(self, username: str) -> Optional[User]:
        pass

    @abstractmethod
    async def update(self, user: User) -> User:
        """
        Persist changes to an existing user.

        Raises:
            NotFoundError: If the user does not exist
        """
        pass
