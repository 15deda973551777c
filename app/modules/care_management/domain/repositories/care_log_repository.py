# 📄 File: app/modules/care_management/domain/repositories/care_log_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines how care diary entries are saved and looked up.
# 🧪 Purpose (Technical Summary):
# Repository interface for CareLog entities (append-only: no update operation).
# 🔗 Dependencies:
# CareLog domain model, typing, abc
# 🔄 Connected Modules / Calls From:
# care_service.py, plant deletion handler, care_log_repository_impl.py

from abc import ABC, abstractmethod
from typing import List

from ..models.care_log import CareLog


class CareLogRepository(ABC):
    """
    Repository interface for CareLog data access. Care logs are append-only.
    """

    @abstractmethod
    async def create(self, care_log: CareLog) -> CareLog:
        pass

    @abstractmethod
    async def list_by_plant(self, plant_id: int) -> List[CareLog]:
        """List a plant's care logs, newest first."""
        pass

    @abstractmethod
    async def list_by_user(self, user_id: int) -> List[CareLog]:
        """List all of a user's care logs, newest first."""
        pass

    @abstractmethod
    async def delete_by_plant(self, plant_id: int) -> int:
        """
        Remove every care log of a plant (used when the plant is deleted).

        Returns:
            Number of removed logs
        """
        pass
