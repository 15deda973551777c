# 📄 File: app/modules/plant_management/domain/repositories/plant_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines the contract for saving, finding, changing and removing plants.
# 🧪 Purpose (Technical Summary):
# Repository interface for Plant entities following the Repository pattern.
# 🔗 Dependencies:
# Plant domain model, typing, abc
# 🔄 Connected Modules / Calls From:
# plant_service.py, infrastructure implementation (plant_repository_impl.py)

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models.plant import Plant


class PlantRepository(ABC):
    """
    Repository interface for Plant entity data access operations.
    """

    @abstractmethod
    async def create(self, plant: Plant) -> Plant:
        """
        Create a new plant.

        Args:
            plant: Plant entity to create

        Returns:
            Created Plant with generated id
        """
        pass

    @abstractmethod
    async def get_by_id(self, plant_id: int) -> Optional[Plant]:
        pass

    @abstractmethod
    async def list_by_user(self, user_id: int) -> List[Plant]:
        """List a user's plants, newest first."""
        pass

    @abstractmethod
    async def update(self, plant: Plant) -> Plant:
        """
        Persist changes to an existing plant.

        Raises:
            PlantNotFoundError: If the plant does not exist
        """
        pass

    @abstractmethod
    async def delete(self, plant_id: int) -> bool:
        """
        Delete a plant.

        Returns:
            True if a row was removed
        """
        pass
