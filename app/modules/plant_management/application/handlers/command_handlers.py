# 📄 File: app/modules/plant_management/application/handlers/command_handlers.py
# 🧭 Purpose (Layman Explanation):
# Carries out plant actions that touch more than the plant itself: adding a plant also
# schedules its first watering reminder, and removing a plant cleans up its diary,
# reminders and tips.
# 🧪 Purpose (Technical Summary):
# CQRS command handlers orchestrating plant, reminder, care log and recommendation
# domain services/repositories inside the request's unit of work.
# 🔗 Dependencies:
# plant_management domain, care_management domain, recommendations domain
# 🔄 Connected Modules / Calls From:
# app.modules.plant_management.presentation.api.v1.plants

__all__ = [
    "CreatePlantCommandHandler",
    "DeletePlantCommandHandler",
]

import logging

from app.modules.care_management.domain.repositories.care_log_repository import CareLogRepository
from app.modules.care_management.domain.repositories.reminder_repository import ReminderRepository
from app.modules.care_management.domain.services.reminder_service import ReminderService
from app.modules.plant_management.application.commands.create_plant import CreatePlantCommand
from app.modules.plant_management.application.commands.delete_plant import DeletePlantCommand
from app.modules.plant_management.domain.models.plant import Plant
from app.modules.plant_management.domain.services.plant_service import PlantService
from app.modules.recommendations.domain.repositories.recommendation_repository import RecommendationRepository

logger = logging.getLogger(__name__)


class CreatePlantCommandHandler:
    """
    Handles plant creation: stores the plant and schedules its first watering reminder.
    """

    def __init__(self, plant_service: PlantService, reminder_service: ReminderService):
        self._plant_service = plant_service
        self._reminder_service = reminder_service

    async def handle(self, command: CreatePlantCommand) -> Plant:
        plant = await self._plant_service.create_plant(command.user_id, command.to_plant_data())
        await self._reminder_service.schedule_watering(plant)
        logger.info(f"🌱 Plant {plant.id} created for user {command.user_id}")
        return plant


class DeletePlantCommandHandler:
    """
    Handles plant deletion.

    Care logs and reminders of the plant are deleted; recommendations are kept
    but detached from the plant.
    """

    def __init__(
        self,
        plant_service: PlantService,
        care_log_repository: CareLogRepository,
        reminder_repository: ReminderRepository,
        recommendation_repository: RecommendationRepository,
    ):
        self._plant_service = plant_service
        self._care_log_repository = care_log_repository
        self._reminder_repository = reminder_repository
        self._recommendation_repository = recommendation_repository

    async def handle(self, command: DeletePlantCommand) -> None:
        plant = await self._plant_service.get_owned_plant(command.plant_id, command.user_id)

        logs_removed = await self._care_log_repository.delete_by_plant(plant.id)
        reminders_removed = await self._reminder_repository.delete_by_plant(plant.id)
        detached = await self._recommendation_repository.detach_plant(plant.id)
        await self._plant_service.delete_plant(plant)

        logger.info(
            f"Deleted plant {plant.id}: {logs_removed} care logs, "
            f"{reminders_removed} reminders removed, {detached} recommendations detached"
        )
