# 📄 File: app/modules/care_management/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# Puts together the pieces the care diary and reminder endpoints need for every request.
# 🧪 Purpose (Technical Summary):
# FastAPI dependency providers for care log / reminder repositories, CareService,
# ReminderService and the log-care-activity handler, sharing the request session.
# 🔗 Dependencies:
# FastAPI, app.shared.infrastructure.database.session, plant_management dependencies
# 🔄 Connected Modules / Calls From:
# care_logs, reminders and plant_care routers

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.care_management.application.handlers.command_handlers import LogCareActivityCommandHandler
from app.modules.care_management.domain.repositories.care_log_repository import CareLogRepository
from app.modules.care_management.domain.repositories.reminder_repository import ReminderRepository
from app.modules.care_management.domain.services.care_service import CareService
from app.modules.care_management.domain.services.reminder_service import ReminderService
from app.modules.care_management.infrastructure.database.care_log_repository_impl import CareLogRepositoryImpl
from app.modules.care_management.infrastructure.database.reminder_repository_impl import ReminderRepositoryImpl
from app.modules.plant_management.domain.services.plant_service import PlantService
from app.modules.plant_management.presentation.dependencies import get_plant_service
from app.shared.infrastructure.database.session import get_db_session


def get_care_log_repository(session: AsyncSession = Depends(get_db_session)) -> CareLogRepository:
    return CareLogRepositoryImpl(session)


def get_reminder_repository(session: AsyncSession = Depends(get_db_session)) -> ReminderRepository:
    return ReminderRepositoryImpl(session)


def get_care_service(
    care_log_repository: CareLogRepository = Depends(get_care_log_repository),
    plant_service: PlantService = Depends(get_plant_service),
) -> CareService:
    return CareService(care_log_repository, plant_service)


def get_reminder_service(
    reminder_repository: ReminderRepository = Depends(get_reminder_repository),
    plant_service: PlantService = Depends(get_plant_service),
) -> ReminderService:
    return ReminderService(reminder_repository, plant_service)


def get_log_care_activity_handler(
    plant_service: PlantService = Depends(get_plant_service),
    care_service: CareService = Depends(get_care_service),
    reminder_service: ReminderService = Depends(get_reminder_service),
) -> LogCareActivityCommandHandler:
    return LogCareActivityCommandHandler(plant_service, care_service, reminder_service)
