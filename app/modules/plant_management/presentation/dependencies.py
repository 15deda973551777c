# 📄 File: app/modules/plant_management/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# Puts together the pieces each plant endpoint needs (database access, plant rules,
# reminder scheduling) for every request.
# 🧪 Purpose (Technical Summary):
# FastAPI dependency providers for plant repositories, PlantService and the plant
# command handlers, all sharing the request's database session.
# 🔗 Dependencies:
# FastAPI, app.shared.infrastructure.database.session, plant/care/recommendation infrastructure
# 🔄 Connected Modules / Calls From:
# plants router, care_management and recommendations presentation dependencies

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.care_management.domain.services.reminder_service import ReminderService
from app.modules.care_management.infrastructure.database.care_log_repository_impl import CareLogRepositoryImpl
from app.modules.care_management.infrastructure.database.reminder_repository_impl import ReminderRepositoryImpl
from app.modules.plant_management.application.handlers.command_handlers import (
    CreatePlantCommandHandler,
    DeletePlantCommandHandler,
)
from app.modules.plant_management.domain.repositories.plant_repository import PlantRepository
from app.modules.plant_management.domain.services.plant_service import PlantService
from app.modules.plant_management.infrastructure.database.plant_repository_impl import PlantRepositoryImpl
from app.modules.recommendations.infrastructure.database.recommendation_repository_impl import (
    RecommendationRepositoryImpl,
)
from app.shared.infrastructure.database.session import get_db_session


def get_plant_repository(session: AsyncSession = Depends(get_db_session)) -> PlantRepository:
    return PlantRepositoryImpl(session)


def get_plant_service(plant_repository: PlantRepository = Depends(get_plant_repository)) -> PlantService:
    return PlantService(plant_repository)


def get_create_plant_handler(
    session: AsyncSession = Depends(get_db_session),
    plant_service: PlantService = Depends(get_plant_service),
) -> CreatePlantCommandHandler:
    reminder_service = ReminderService(ReminderRepositoryImpl(session), plant_service)
    return CreatePlantCommandHandler(plant_service, reminder_service)


def get_delete_plant_handler(
    session: AsyncSession = Depends(get_db_session),
    plant_service: PlantService = Depends(get_plant_service),
) -> DeletePlantCommandHandler:
    return DeletePlantCommandHandler(
        plant_service,
        CareLogRepositoryImpl(session),
        ReminderRepositoryImpl(session),
        RecommendationRepositoryImpl(session),
    )
