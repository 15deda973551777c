# 📄 File: app/modules/care_management/domain/repositories/reminder_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines how plant reminders are saved, found by date, and ticked off.
# 🧪 Purpose (Technical Summary):
# Repository interface for Reminder entities with date-window queries.
# 🔗 Dependencies:
# Reminder domain model, typing, abc
# 🔄 Connected Modules / Calls From:
# reminder_service.py, plant deletion handler, reminder_repository_impl.py

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from ..models.reminder import Reminder


class ReminderRepository(ABC):
    """
    Repository interface for Reminder data access.
    All list operations return reminders ordered by due date ascending.
    """

    @abstractmethod
    async def create(self, reminder: Reminder) -> Reminder:
        pass

    @abstractmethod
    async def get_by_id(self, reminder_id: int) -> Optional[Reminder]:
        pass

    @abstractmethod
    async def list_by_user(self, user_id: int) -> List[Reminder]:
        pass

    @abstractmethod
    async def list_by_plant(self, plant_id: int) -> List[Reminder]:
        pass

    @abstractmethod
    async def list_due_between(
        self,
        user_id: int,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        completed: Optional[bool] = None,
    ) -> List[Reminder]:
        """
        List a user's reminders with ``start <= due_date < end``.

        Args:
            user_id: Owner id
            start: Inclusive lower bound (None = unbounded)
            end: Exclusive upper bound (None = unbounded)
            completed: Filter on completion flag (None = both)
        """
        pass

    @abstractmethod
    async def update(self, reminder: Reminder) -> Reminder:
        pass

    @abstractmethod
    async def delete_by_plant(self, plant_id: int) -> int:
        pass
