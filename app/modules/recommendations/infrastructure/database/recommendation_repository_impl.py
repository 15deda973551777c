# 📄 File: app/modules/recommendations/infrastructure/database/recommendation_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Reads and writes saved care tips in the database.
#
# 🧪 Purpose (Technical Summary):
# Async SQLAlchemy implementation of RecommendationRepository (newest-first listings,
# bulk plant detachment).
#
# 🔗 Dependencies:
# - recommendations domain (interface and model), RecommendationModel
#
# 🔄 Connected Modules / Calls From:
# - app.modules.recommendations.presentation.dependencies
# - app.modules.plant_management.presentation.dependencies (plant deletion)

import logging
from typing import List, Optional

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.recommendations.domain.models.recommendation import Recommendation
from app.modules.recommendations.domain.repositories.recommendation_repository import RecommendationRepository
from app.modules.recommendations.infrastructure.database.models import RecommendationModel
from app.shared.core.exceptions import RecommendationNotFoundError, RepositoryError
from app.shared.utils.helpers import ensure_utc

logger = logging.getLogger(__name__)


class RecommendationRepositoryImpl(RecommendationRepository):
    """
    SQLAlchemy implementation of the RecommendationRepository interface.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def create(self, recommendation: Recommendation) -> Recommendation:
        try:
            model = RecommendationModel(
                user_id=recommendation.user_id,
                plant_id=recommendation.plant_id,
                title=recommendation.title,
                content=recommendation.content,
                tags=list(recommendation.tags),
                created_at=recommendation.created_at,
                updated_at=recommendation.updated_at,
                read=recommendation.read,
            )
            self._session.add(model)
            await self._session.flush()

            logger.debug(f"Created recommendation {model.id} for user {model.user_id}")
            return self._model_to_domain(model)

        except SQLAlchemyError as e:
            logger.error(f"Database error creating recommendation: {str(e)}")
            raise RepositoryError(
                f"Failed to create recommendation: {str(e)}", operation="create", entity="recommendation"
            ) from e

    async def get_by_id(self, recommendation_id: int) -> Optional[Recommendation]:
        try:
            model = await self._session.get(RecommendationModel, recommendation_id)
            return self._model_to_domain(model) if model else None

        except SQLAlchemyError as e:
            logger.error(f"Database error retrieving recommendation {recommendation_id}: {str(e)}")
            raise RepositoryError(
                f"Failed to retrieve recommendation: {str(e)}", operation="get", entity="recommendation"
            ) from e

    async def list_by_user(self, user_id: int, plant_id: Optional[int] = None) -> List[Recommendation]:
        try:
            query = select(RecommendationModel).where(RecommendationModel.user_id == user_id)
            if plant_id is not None:
                query = query.where(RecommendationModel.plant_id == plant_id)
            query = query.order_by(RecommendationModel.created_at.desc(), RecommendationModel.id.desc())

            result = await self._session.execute(query)
            return [self._model_to_domain(model) for model in result.scalars().all()]

        except SQLAlchemyError as e:
            logger.error(f"Database error listing recommendations for user {user_id}: {str(e)}")
            raise RepositoryError(
                f"Failed to list recommendations: {str(e)}", operation="list", entity="recommendation"
            ) from e

    async def update(self, recommendation: Recommendation) -> Recommendation:
        try:
            model = await self._session.get(RecommendationModel, recommendation.id)
            if model is None:
                raise RecommendationNotFoundError(recommendation.id)

            model.title = recommendation.title
            model.content = recommendation.content
            model.tags = list(recommendation.tags)
            model.read = recommendation.read
            model.updated_at = recommendation.updated_at
            await self._session.flush()

            return self._model_to_domain(model)

        except SQLAlchemyError as e:
            logger.error(f"Database error updating recommendation {recommendation.id}: {str(e)}")
            raise RepositoryError(
                f"Failed to update recommendation: {str(e)}", operation="update", entity="recommendation"
            ) from e

    async def detach_plant(self, plant_id: int) -> int:
        try:
            result = await self._session.execute(
                update(RecommendationModel)
                .where(RecommendationModel.plant_id == plant_id)
                .values(plant_id=None)
            )
            return result.rowcount

        except SQLAlchemyError as e:
            logger.error(f"Database error detaching recommendations from plant {plant_id}: {str(e)}")
            raise RepositoryError(
                f"Failed to detach recommendations: {str(e)}", operation="update", entity="recommendation"
            ) from e

    @staticmethod
    def _model_to_domain(model: RecommendationModel) -> Recommendation:
        return Recommendation(
            id=model.id,
            user_id=model.user_id,
            plant_id=model.plant_id,
            title=model.title,
            content=model.content,
            tags=list(model.tags or []),
            created_at=ensure_utc(model.created_at),
            updated_at=ensure_utc(model.updated_at),
            read=bool(model.read),
        )
