# 📄 File: app/modules/recommendations/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# Puts together what the care tips endpoints need for every request.
# 🧪 Purpose (Technical Summary):
# FastAPI dependency providers for the recommendation repository and service.
# 🔗 Dependencies:
# FastAPI, app.shared.infrastructure.database.session, plant_management dependencies
# 🔄 Connected Modules / Calls From:
# recommendations router

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.plant_management.domain.services.plant_service import PlantService
from app.modules.plant_management.presentation.dependencies import get_plant_service
from app.modules.recommendations.domain.repositories.recommendation_repository import RecommendationRepository
from app.modules.recommendations.domain.services.recommendation_service import RecommendationService
from app.modules.recommendations.infrastructure.database.recommendation_repository_impl import (
    RecommendationRepositoryImpl,
)
from app.shared.infrastructure.database.session import get_db_session


def get_recommendation_repository(session: AsyncSession = Depends(get_db_session)) -> RecommendationRepository:
    return RecommendationRepositoryImpl(session)


def get_recommendation_service(
    recommendation_repository: RecommendationRepository = Depends(get_recommendation_repository),
    plant_service: PlantService = Depends(get_plant_service),
) -> RecommendationService:
    return RecommendationService(recommendation_repository, plant_service)
