# 📄 File: app/modules/care_management/application/handlers/command_handlers.py
# 🧭 Purpose (Layman Explanation):
# Records a care diary entry. When the entry is a watering, the plant is marked as
# watered and the next watering reminder is scheduled.
# 🧪 Purpose (Technical Summary):
# CQRS command handler coordinating PlantService, CareService and ReminderService
# for the log-care-activity use case.
# 🔗 Dependencies:
# care_management domain services, plant_management PlantService
# 🔄 Connected Modules / Calls From:
# app.modules.care_management.presentation.api.v1.care_logs

__all__ = ["LogCareActivityCommandHandler"]

import logging

from app.modules.care_management.application.commands.log_care_activity import LogCareActivityCommand
from app.modules.care_management.domain.models.care_log import CareLog
from app.modules.care_management.domain.services.care_service import CareService
from app.modules.care_management.domain.services.reminder_service import ReminderService
from app.modules.plant_management.domain.services.plant_service import PlantService

logger = logging.getLogger(__name__)


class LogCareActivityCommandHandler:
    """
    Handles care logging and the watering side effects.
    """

    def __init__(
        self,
        plant_service: PlantService,
        care_service: CareService,
        reminder_service: ReminderService,
    ):
        self._plant_service = plant_service
        self._care_service = care_service
        self._reminder_service = reminder_service

    async def handle(self, command: LogCareActivityCommand) -> CareLog:
        plant = await self._plant_service.get_owned_plant(command.plant_id, command.user_id)

        care_log = await self._care_service.record_activity(
            plant,
            command.activity_type,
            notes=command.notes,
            performed_at=command.performed_at,
        )

        if care_log.is_watering:
            plant = await self._plant_service.mark_watered(plant, care_log.performed_at)
            await self._reminder_service.schedule_watering(plant)
            logger.info(f"💧 Plant {plant.id} watered at {care_log.performed_at.isoformat()}")

        return care_log
