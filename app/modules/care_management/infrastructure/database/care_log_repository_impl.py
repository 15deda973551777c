# 📄 File: app/modules/care_management/infrastructure/database/care_log_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Reads and writes care diary entries in the database.
#
# 🧪 Purpose (Technical Summary):
# Async SQLAlchemy implementation of CareLogRepository (newest-first listings).
#
# 🔗 Dependencies:
# - care_management domain (interface and model), CareLogModel
#
# 🔄 Connected Modules / Calls From:
# - app.modules.care_management.presentation.dependencies

import logging
from typing import List

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.care_management.domain.models.care_log import ActivityType, CareLog
from app.modules.care_management.domain.repositories.care_log_repository import CareLogRepository
from app.modules.care_management.infrastructure.database.models import CareLogModel
from app.shared.core.exceptions import RepositoryError
from app.shared.utils.helpers import ensure_utc

logger = logging.getLogger(__name__)


class CareLogRepositoryImpl(CareLogRepository):
    """
    SQLAlchemy implementation of the CareLogRepository interface.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def create(self, care_log: CareLog) -> CareLog:
        try:
            model = CareLogModel(
                plant_id=care_log.plant_id,
                user_id=care_log.user_id,
                activity_type=care_log.activity_type.value,
                notes=care_log.notes,
                performed_at=care_log.performed_at,
            )
            self._session.add(model)
            await self._session.flush()

            logger.debug(f"Created care log {model.id} for plant {model.plant_id}")
            return self._model_to_domain(model)

        except SQLAlchemyError as e:
            logger.error(f"Database error creating care log: {str(e)}")
            raise RepositoryError(f"Failed to create care log: {str(e)}", operation="create", entity="care_log") from e

    async def list_by_plant(self, plant_id: int) -> List[CareLog]:
        return await self._list(CareLogModel.plant_id == plant_id)

    async def list_by_user(self, user_id: int) -> List[CareLog]:
        return await self._list(CareLogModel.user_id == user_id)

    async def delete_by_plant(self, plant_id: int) -> int:
        try:
            result = await self._session.execute(delete(CareLogModel).where(CareLogModel.plant_id == plant_id))
            return result.rowcount

        except SQLAlchemyError as e:
            logger.error(f"Database error deleting care logs of plant {plant_id}: {str(e)}")
            raise RepositoryError(f"Failed to delete care logs: {str(e)}", operation="delete", entity="care_log") from e

    async def _list(self, condition) -> List[CareLog]:
        try:
            result = await self._session.execute(
                select(CareLogModel)
                .where(condition)
                .order_by(CareLogModel.performed_at.desc(), CareLogModel.id.desc())
            )
            return [self._model_to_domain(model) for model in result.scalars().all()]

        except SQLAlchemyError as e:
            logger.error(f"Database error listing care logs: {str(e)}")
            raise RepositoryError(f"Failed to list care logs: {str(e)}", operation="list", entity="care_log") from e

    @staticmethod
    def _model_to_domain(model: CareLogModel) -> CareLog:
        return CareLog(
            id=model.id,
            plant_id=model.plant_id,
            user_id=model.user_id,
            activity_type=ActivityType(model.activity_type),
            notes=model.notes,
            performed_at=ensure_utc(model.performed_at),
        )
