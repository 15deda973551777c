# 📄 File: app/modules/plant_management/domain/services/plant_service.py
# 🧭 Purpose (Layman Explanation):
# The rules for working with a user's plants: adding, changing and removing them,
# and making sure nobody can look at or touch someone else's plant.
# 🧪 Purpose (Technical Summary):
# Domain service for plant CRUD with ownership enforcement (404 for unknown plants,
# 403 for plants owned by another user), watering-status filtering and watering bookkeeping.
# 🔗 Dependencies:
# Plant domain model, PlantRepository, watering_service, app.shared.core.exceptions
# 🔄 Connected Modules / Calls From:
# plant command handlers, plant API, care_management and recommendations services

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from app.shared.core.exceptions import AuthorizationError, PlantNotFoundError
from app.shared.utils.helpers import utcnow
from app.shared.utils.logging import get_logger

from ..models.plant import Plant, WateringStatus
from ..repositories.plant_repository import PlantRepository
from .watering_service import plant_watering_status

logger = logging.getLogger(__name__)
audit_logger = get_logger("plant_management.audit")

UPDATABLE_FIELDS = ("name", "species", "image_url", "water_frequency", "light_needs", "care_notes", "last_watered")


class PlantService:
    """
    Domain service for plant management business logic.
    """

    def __init__(self, plant_repository: PlantRepository):
        self._plant_repository = plant_repository

    async def create_plant(self, user_id: int, data: Dict[str, Any]) -> Plant:
        """
        Create a plant owned by the given user.

        Args:
            user_id: Owner id
            data: Plant fields (name, species, image_url, water_frequency, light_needs, ...)

        Returns:
            The persisted Plant
        """
        plant = await self._plant_repository.create(Plant(user_id=user_id, **data))
        audit_logger.log_user_action("create_plant", user_id, resource=f"plant:{plant.id}")
        return plant

    async def get_owned_plant(self, plant_id: int, user_id: int) -> Plant:
        """
        Load a plant and check that it belongs to the user.

        Raises:
            PlantNotFoundError: If the plant does not exist
            AuthorizationError: If the plant belongs to another user
        """
        plant = await self._plant_repository.get_by_id(plant_id)
        if plant is None:
            raise PlantNotFoundError(plant_id)
        if not plant.is_owned_by(user_id):
            logger.warning(f"User {user_id} denied access to plant {plant_id}")
            raise AuthorizationError(
                "You do not have access to this plant",
                resource_type="plant",
                resource_id=plant_id,
            )
        return plant

    async def list_plants(
        self,
        user_id: int,
        status: Optional[WateringStatus] = None,
        now: Optional[datetime] = None,
    ) -> List[Plant]:
        """
        List a user's plants, optionally only those in one watering status.
        """
        plants = await self._plant_repository.list_by_user(user_id)
        if status is None:
            return plants
        reference = now or utcnow()
        return [plant for plant in plants if plant_watering_status(plant, reference) == status]

    async def update_plant(self, plant_id: int, user_id: int, changes: Dict[str, Any]) -> Plant:
        """
        Apply a partial update to an owned plant.

        Unknown keys are ignored; validation runs on assignment.
        """
        plant = await self.get_owned_plant(plant_id, user_id)
        for field, value in changes.items():
            if field in UPDATABLE_FIELDS:
                setattr(plant, field, value)
        updated = await self._plant_repository.update(plant)
        audit_logger.log_user_action("update_plant", user_id, resource=f"plant:{plant_id}")
        return updated

    async def mark_watered(self, plant: Plant, watered_at: datetime) -> Plant:
        plant.record_watering(watered_at)
        return await self._plant_repository.update(plant)

    async def delete_plant(self, plant: Plant) -> None:
        await self._plant_repository.delete(plant.id)
        audit_logger.log_user_action("delete_plant", plant.user_id, resource=f"plant:{plant.id}")
