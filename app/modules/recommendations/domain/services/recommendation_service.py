# 📄 File: app/modules/recommendations/domain/services/recommendation_service.py
# 🧭 Purpose (Layman Explanation):
# Creates and stores care tip sheets for the user and lets them mark tips as read.
# 🧪 Purpose (Technical Summary):
# Domain service persisting generated care guides as Recommendation records, with plant
# and recommendation ownership checks.
# 🔗 Dependencies:
# care_guide_service, RecommendationRepository, plant_management PlantService
# 🔄 Connected Modules / Calls From:
# recommendations API

import logging
from typing import List, Optional

from app.modules.plant_management.domain.services.plant_service import PlantService
from app.shared.core.exceptions import AuthorizationError, RecommendationNotFoundError
from app.shared.utils.logging import get_logger

from ..models.recommendation import Recommendation
from ..repositories.recommendation_repository import RecommendationRepository
from .care_guide_service import build_title, generate_care_recommendation

logger = logging.getLogger(__name__)
audit_logger = get_logger("recommendations.audit")


class RecommendationService:
    """
    Domain service for stored care recommendations.
    """

    def __init__(self, recommendation_repository: RecommendationRepository, plant_service: PlantService):
        self._recommendation_repository = recommendation_repository
        self._plant_service = plant_service

    async def list_recommendations(self, user_id: int, plant_id: Optional[int] = None) -> List[Recommendation]:
        return await self._recommendation_repository.list_by_user(user_id, plant_id)

    async def generate(
        self,
        user_id: int,
        plant_name: str,
        plant_id: Optional[int] = None,
        plant_species: Optional[str] = None,
        care_issue: Optional[str] = None,
        plant_description: Optional[str] = None,
    ) -> Recommendation:
        """
        Generate a care guide and store it for the user.

        Args:
            user_id: Requesting user
            plant_name: Plant name the guide is written for
            plant_id: Optional plant to attach the recommendation to (must be owned)
            plant_species: Optional species used for guide matching
            care_issue: Optional problem description
            plant_description: Optional description of plant and surroundings

        Raises:
            PlantNotFoundError / AuthorizationError: When plant_id is given and not usable
        """
        if plant_id is not None:
            await self._plant_service.get_owned_plant(plant_id, user_id)

        guide = generate_care_recommendation(plant_name, plant_species, care_issue, plant_description)
        recommendation = await self._recommendation_repository.create(
            Recommendation(
                user_id=user_id,
                plant_id=plant_id,
                title=build_title(plant_name, care_issue),
                content=guide.content,
                tags=guide.tags,
            )
        )

        audit_logger.log_business_event(
            "recommendation_generated",
            f"🌱 Care recommendation generated for {plant_name}",
            entity_id=recommendation.id,
            entity_type="recommendation",
            extra={"user_id": user_id, "plant_id": plant_id},
        )
        return recommendation

    async def mark_read(self, recommendation_id: int, user_id: int) -> Recommendation:
        """
        Mark a recommendation as read.

        Raises:
            RecommendationNotFoundError: If it does not exist
            AuthorizationError: If it belongs to another user
        """
        recommendation = await self._recommendation_repository.get_by_id(recommendation_id)
        if recommendation is None:
            raise RecommendationNotFoundError(recommendation_id)
        if recommendation.user_id != user_id:
            logger.warning(f"User {user_id} denied access to recommendation {recommendation_id}")
            raise AuthorizationError(
                "You do not have access to this recommendation",
                resource_type="recommendation",
                resource_id=recommendation_id,
            )

        if recommendation.read:
            return recommendation
        recommendation.mark_read()
        return await self._recommendation_repository.update(recommendation)
