# 📄 File: app/modules/care_management/domain/services/care_service.py
# 🧭 Purpose (Layman Explanation):
# Keeps the plant care diary: writes new entries and lists past care for one plant
# or for all of a user's plants.
# 🧪 Purpose (Technical Summary):
# Domain service for care log recording and retrieval with plant ownership checks
# delegated to PlantService.
# 🔗 Dependencies:
# CareLog domain model, CareLogRepository, plant_management PlantService
# 🔄 Connected Modules / Calls From:
# log-care-activity command handler, care log API

import logging
from datetime import datetime
from typing import List, Optional

from app.modules.plant_management.domain.models.plant import Plant
from app.modules.plant_management.domain.services.plant_service import PlantService
from app.shared.utils.helpers import utcnow

from ..models.care_log import ActivityType, CareLog
from ..repositories.care_log_repository import CareLogRepository

logger = logging.getLogger(__name__)


class CareService:
    """
    Domain service for care log business logic.
    """

    def __init__(self, care_log_repository: CareLogRepository, plant_service: PlantService):
        self._care_log_repository = care_log_repository
        self._plant_service = plant_service

    async def record_activity(
        self,
        plant: Plant,
        activity_type: ActivityType,
        notes: Optional[str] = None,
        performed_at: Optional[datetime] = None,
    ) -> CareLog:
        """
        Append a care log for an (already ownership-checked) plant.

        Args:
            plant: Plant the care was performed on
            activity_type: Kind of care
            notes: Free-form notes
            performed_at: When the care happened (defaults to now)

        Returns:
            The persisted CareLog
        """
        care_log = await self._care_log_repository.create(
            CareLog(
                plant_id=plant.id,
                user_id=plant.user_id,
                activity_type=activity_type,
                notes=notes,
                performed_at=performed_at or utcnow(),
            )
        )
        logger.info(f"Logged {care_log.activity_type.value} for plant {plant.id}")
        return care_log

    async def list_plant_logs(self, plant_id: int, user_id: int) -> List[CareLog]:
        """
        List a plant's care logs, newest first.

        Raises:
            PlantNotFoundError / AuthorizationError: via PlantService
        """
        await self._plant_service.get_owned_plant(plant_id, user_id)
        return await self._care_log_repository.list_by_plant(plant_id)

    async def list_user_logs(self, user_id: int) -> List[CareLog]:
        return await self._care_log_repository.list_by_user(user_id)
