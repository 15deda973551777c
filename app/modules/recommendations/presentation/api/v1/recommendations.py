# 📄 File: app/modules/recommendations/presentation/api/v1/recommendations.py
# 🧭 Purpose (Layman Explanation):
# The web endpoints for care tips: ask for tips about a plant, read saved tips, mark them
# as read, and get quick basic care instructions.
# 🧪 Purpose (Technical Summary):
# FastAPI router for stored recommendations. Generation is rate limited per client with
# slowapi; content comes from the static care guide table, never from a model.
# 🔗 Dependencies:
# FastAPI, slowapi limiter (app.shared.core.rate_limiter), recommendation schemas/dependencies
# 🔄 Connected Modules / Calls From:
# app.api.v1.router (mounted under /ai-recommendations)

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request, status

from app.modules.recommendations.domain.services.care_guide_service import basic_care_instructions
from app.modules.recommendations.domain.services.recommendation_service import RecommendationService
from app.modules.recommendations.presentation.api.schemas.recommendation_schemas import (
    CareInstructionsResponse,
    GenerateRecommendationRequest,
    RecommendationResponse,
)
from app.modules.recommendations.presentation.dependencies import get_recommendation_service
from app.modules.user_management.domain.models.user import User
from app.modules.user_management.presentation.dependencies import get_current_user
from app.shared.core.rate_limiter import limiter, recommendation_rate_limit

logger = logging.getLogger(__name__)

recommendations_router = APIRouter()


@recommendations_router.get(
    "",
    response_model=List[RecommendationResponse],
    summary="List recommendations",
    description="The current user's stored recommendations, newest first",
)
async def list_recommendations(
    plant_id: Optional[int] = Query(None, description="Only recommendations for this plant"),
    current_user: User = Depends(get_current_user),
    recommendation_service: RecommendationService = Depends(get_recommendation_service),
) -> List[RecommendationResponse]:
    recommendations = await recommendation_service.list_recommendations(current_user.id, plant_id)
    return [RecommendationResponse.model_validate(item) for item in recommendations]


@recommendations_router.get(
    "/care-instructions",
    response_model=CareInstructionsResponse,
    summary="Basic care instructions",
    description="Short watering and light instructions for a plant name and species",
)
async def get_care_instructions(
    plant_name: str = Query(..., min_length=1),
    plant_species: Optional[str] = Query(None),
    current_user: User = Depends(get_current_user),
) -> CareInstructionsResponse:
    return CareInstructionsResponse(
        plant_name=plant_name,
        plant_species=plant_species,
        instructions=basic_care_instructions(plant_name, plant_species),
    )


@recommendations_router.post(
    "/generate",
    response_model=RecommendationResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Generate a recommendation",
    description="Generate and store a care guide for a plant, optionally addressing an issue",
    responses={
        403: {"description": "Plant belongs to another user"},
        404: {"description": "Plant not found"},
        429: {"description": "Rate limit exceeded"},
    },
)
@limiter.limit(recommendation_rate_limit)
async def generate_recommendation(
    request: Request,
    request_data: GenerateRecommendationRequest,
    current_user: User = Depends(get_current_user),
    recommendation_service: RecommendationService = Depends(get_recommendation_service),
) -> RecommendationResponse:
    recommendation = await recommendation_service.generate(
        current_user.id,
        request_data.plant_name,
        plant_id=request_data.plant_id,
        plant_species=request_data.plant_species,
        care_issue=request_data.care_issue,
        plant_description=request_data.plant_description,
    )
    return RecommendationResponse.model_validate(recommendation)


@recommendations_router.post(
    "/{recommendation_id}/read",
    response_model=RecommendationResponse,
    summary="Mark a recommendation as read",
    responses={
        403: {"description": "Recommendation belongs to another user"},
        404: {"description": "Recommendation not found"},
    },
)
async def mark_recommendation_read(
    recommendation_id: int,
    current_user: User = Depends(get_current_user),
    recommendation_service: RecommendationService = Depends(get_recommendation_service),
) -> RecommendationResponse:
    recommendation = await recommendation_service.mark_read(recommendation_id, current_user.id)
    return RecommendationResponse.model_validate(recommendation)
