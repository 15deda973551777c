# 📄 File: app/modules/recommendations/domain/repositories/recommendation_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines how saved care tips are stored and found again.
# 🧪 Purpose (Technical Summary):
# Repository interface for Recommendation entities.
# 🔗 Dependencies:
# Recommendation domain model, typing, abc
# 🔄 Connected Modules / Calls From:
# recommendation_service.py, plant deletion handler, recommendation_repository_impl.py

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models.recommendation import Recommendation


class RecommendationRepository(ABC):
    """
    Repository interface for Recommendation data access.
    """

    @abstractmethod
    async def create(self, recommendation: Recommendation) -> Recommendation:
        pass

    @abstractmethod
    async def get_by_id(self, recommendation_id: int) -> Optional[Recommendation]:
        pass

    @abstractmethod
    async def list_by_user(self, user_id: int, plant_id: Optional[int] = None) -> List[Recommendation]:
        """List a user's recommendations newest first, optionally for one plant."""
        pass

    @abstractmethod
    async def update(self, recommendation: Recommendation) -> Recommendation:
        pass

    @abstractmethod
    async def detach_plant(self, plant_id: int) -> int:
        """
        Clear ``plant_id`` on every recommendation generated for a plant.

        Returns:
            Number of recommendations detached
        """
        pass
