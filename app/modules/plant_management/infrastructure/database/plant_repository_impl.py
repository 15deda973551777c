# 📄 File: app/modules/plant_management/infrastructure/database/plant_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Reads and writes plants in the database.
#
# 🧪 Purpose (Technical Summary):
# Async SQLAlchemy implementation of PlantRepository with domain/model mapping and
# SQLAlchemyError translation to RepositoryError.
#
# 🔗 Dependencies:
# - app.modules.plant_management.domain (interface and model)
# - PlantModel, SQLAlchemy async session
#
# 🔄 Connected Modules / Calls From:
# - app.modules.plant_management.presentation.dependencies

import logging
from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.plant_management.domain.models.plant import LightNeeds, Plant
from app.modules.plant_management.domain.repositories.plant_repository import PlantRepository
from app.modules.plant_management.infrastructure.database.models import PlantModel
from app.shared.core.exceptions import PlantNotFoundError, RepositoryError
from app.shared.utils.helpers import ensure_utc

logger = logging.getLogger(__name__)


class PlantRepositoryImpl(PlantRepository):
    """
    SQLAlchemy implementation of the PlantRepository interface.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def create(self, plant: Plant) -> Plant:
        try:
            plant_model = self._domain_to_model(plant)
            self._session.add(plant_model)
            await self._session.flush()
            await self._session.refresh(plant_model)

            logger.info(f"Created plant with ID: {plant_model.id}")
            return self._model_to_domain(plant_model)

        except SQLAlchemyError as e:
            logger.error(f"Database error during plant creation: {str(e)}")
            raise RepositoryError(f"Failed to create plant: {str(e)}", operation="create", entity="plant") from e

    async def get_by_id(self, plant_id: int) -> Optional[Plant]:
        try:
            plant_model = await self._session.get(PlantModel, plant_id)
            return self._model_to_domain(plant_model) if plant_model else None

        except SQLAlchemyError as e:
            logger.error(f"Database error retrieving plant {plant_id}: {str(e)}")
            raise RepositoryError(f"Failed to retrieve plant: {str(e)}", operation="get", entity="plant") from e

    async def list_by_user(self, user_id: int) -> List[Plant]:
        try:
            result = await self._session.execute(
                select(PlantModel)
                .where(PlantModel.user_id == user_id)
                .order_by(PlantModel.created_at.desc(), PlantModel.id.desc())
            )
            return [self._model_to_domain(model) for model in result.scalars().all()]

        except SQLAlchemyError as e:
            logger.error(f"Database error listing plants for user {user_id}: {str(e)}")
            raise RepositoryError(f"Failed to list plants: {str(e)}", operation="list", entity="plant") from e

    async def update(self, plant: Plant) -> Plant:
        try:
            plant_model = await self._session.get(PlantModel, plant.id)
            if plant_model is None:
                raise PlantNotFoundError(plant.id)

            plant_model.name = plant.name
            plant_model.species = plant.species
            plant_model.image_url = plant.image_url
            plant_model.water_frequency = plant.water_frequency
            plant_model.light_needs = plant.light_needs.value
            plant_model.care_notes = plant.care_notes
            plant_model.last_watered = plant.last_watered
            await self._session.flush()

            logger.debug(f"Updated plant: {plant.id}")
            return self._model_to_domain(plant_model)

        except SQLAlchemyError as e:
            logger.error(f"Database error updating plant {plant.id}: {str(e)}")
            raise RepositoryError(f"Failed to update plant: {str(e)}", operation="update", entity="plant") from e

    async def delete(self, plant_id: int) -> bool:
        try:
            result = await self._session.execute(delete(PlantModel).where(PlantModel.id == plant_id))
            return result.rowcount > 0

        except SQLAlchemyError as e:
            logger.error(f"Database error deleting plant {plant_id}: {str(e)}")
            raise RepositoryError(f"Failed to delete plant: {str(e)}", operation="delete", entity="plant") from e

    # =========================================================================
    # MAPPING
    # =========================================================================

    @staticmethod
    def _domain_to_model(plant: Plant) -> PlantModel:
        return PlantModel(
            id=plant.id,
            user_id=plant.user_id,
            name=plant.name,
            species=plant.species,
            image_url=plant.image_url,
            water_frequency=plant.water_frequency,
            light_needs=plant.light_needs.value,
            care_notes=plant.care_notes,
            created_at=plant.created_at,
            last_watered=plant.last_watered,
        )

    @staticmethod
    def _model_to_domain(model: PlantModel) -> Plant:
        return Plant(
            id=model.id,
            user_id=model.user_id,
            name=model.name,
            species=model.species,
            image_url=model.image_url,
            water_frequency=model.water_frequency,
            light_needs=LightNeeds(model.light_needs),
            care_notes=model.care_notes,
            created_at=ensure_utc(model.created_at),
            last_watered=ensure_utc(model.last_watered),
        )
