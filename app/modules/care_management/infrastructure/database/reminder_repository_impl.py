# 📄 File: app/modules/care_management/infrastructure/database/reminder_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Reads and writes plant reminders in the database, including "what is due between
# these two dates" lookups.
#
# 🧪 Purpose (Technical Summary):
# Async SQLAlchemy implementation of ReminderRepository. All listings are ordered by
# due date ascending (id as tie-breaker).
#
# 🔗 Dependencies:
# - care_management domain (interface and model), ReminderModel
#
# 🔄 Connected Modules / Calls From:
# - app.modules.care_management.presentation.dependencies
# - app.modules.plant_management.presentation.dependencies (plant deletion)

import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.care_management.domain.models.reminder import Reminder, ReminderType
from app.modules.care_management.domain.repositories.reminder_repository import ReminderRepository
from app.modules.care_management.infrastructure.database.models import ReminderModel
from app.shared.core.exceptions import ReminderNotFoundError, RepositoryError
from app.shared.utils.helpers import ensure_utc

logger = logging.getLogger(__name__)


class ReminderRepositoryImpl(ReminderRepository):
    """
    SQLAlchemy implementation of the ReminderRepository interface.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def create(self, reminder: Reminder) -> Reminder:
        try:
            model = ReminderModel(
                plant_id=reminder.plant_id,
                user_id=reminder.user_id,
                reminder_type=reminder.reminder_type.value,
                due_date=reminder.due_date,
                completed=reminder.completed,
                created_at=reminder.created_at,
                completed_at=reminder.completed_at,
            )
            self._session.add(model)
            await self._session.flush()

            logger.debug(f"Created reminder {model.id} for plant {model.plant_id}")
            return self._model_to_domain(model)

        except SQLAlchemyError as e:
            logger.error(f"Database error creating reminder: {str(e)}")
            raise RepositoryError(f"Failed to create reminder: {str(e)}", operation="create", entity="reminder") from e

    async def get_by_id(self, reminder_id: int) -> Optional[Reminder]:
        try:
            model = await self._session.get(ReminderModel, reminder_id)
            return self._model_to_domain(model) if model else None

        except SQLAlchemyError as e:
            logger.error(f"Database error retrieving reminder {reminder_id}: {str(e)}")
            raise RepositoryError(f"Failed to retrieve reminder: {str(e)}", operation="get", entity="reminder") from e

    async def list_by_user(self, user_id: int) -> List[Reminder]:
        return await self._list(ReminderModel.user_id == user_id)

    async def list_by_plant(self, plant_id: int) -> List[Reminder]:
        return await self._list(ReminderModel.plant_id == plant_id)

    async def list_due_between(
        self,
        user_id: int,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        completed: Optional[bool] = None,
    ) -> List[Reminder]:
        conditions = [ReminderModel.user_id == user_id]
        if start is not None:
            conditions.append(ReminderModel.due_date >= start)
        if end is not None:
            conditions.append(ReminderModel.due_date < end)
        if completed is not None:
            conditions.append(ReminderModel.completed.is_(completed))
        return await self._list(*conditions)

    async def update(self, reminder: Reminder) -> Reminder:
        try:
            model = await self._session.get(ReminderModel, reminder.id)
            if model is None:
                raise ReminderNotFoundError(reminder.id)

            model.reminder_type = reminder.reminder_type.value
            model.due_date = reminder.due_date
            model.completed = reminder.completed
            model.completed_at = reminder.completed_at
            await self._session.flush()

            return self._model_to_domain(model)

        except SQLAlchemyError as e:
            logger.error(f"Database error updating reminder {reminder.id}: {str(e)}")
            raise RepositoryError(f"Failed to update reminder: {str(e)}", operation="update", entity="reminder") from e

    async def delete_by_plant(self, plant_id: int) -> int:
        try:
            result = await self._session.execute(delete(ReminderModel).where(ReminderModel.plant_id == plant_id))
            return result.rowcount

        except SQLAlchemyError as e:
            logger.error(f"Database error deleting reminders of plant {plant_id}: {str(e)}")
            raise RepositoryError(f"Failed to delete reminders: {str(e)}", operation="delete", entity="reminder") from e

    async def _list(self, *conditions) -> List[Reminder]:
        try:
            result = await self._session.execute(
                select(ReminderModel)
                .where(*conditions)
                .order_by(ReminderModel.due_date.asc(), ReminderModel.id.asc())
            )
            return [self._model_to_domain(model) for model in result.scalars().all()]

        except SQLAlchemyError as e:
            logger.error(f"Database error listing reminders: {str(e)}")
            raise RepositoryError(f"Failed to list reminders: {str(e)}", operation="list", entity="reminder") from e

    @staticmethod
    def _model_to_domain(model: ReminderModel) -> Reminder:
        return Reminder(
            id=model.id,
            plant_id=model.plant_id,
            user_id=model.user_id,
            reminder_type=ReminderType(model.reminder_type),
            due_date=ensure_utc(model.due_date),
            completed=bool(model.completed),
            created_at=ensure_utc(model.created_at),
            completed_at=ensure_utc(model.completed_at),
        )
