# 📄 File: app/modules/care_management/domain/models/reminder.py
# 🧭 Purpose (Layman Explanation):
# A reminder is a future to-do for a plant ("water the monstera on Friday") that can be
# ticked off once done.
# 🧪 Purpose (Technical Summary):
# Reminder domain entity with ReminderType enumeration and idempotent completion.
# 🔗 Dependencies:
# pydantic, datetime, enum, app.shared.utils.helpers
# 🔄 Connected Modules / Calls From:
# reminder_service.py, reminder repositories, plant creation and watering handlers

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.shared.utils.helpers import ensure_utc, utcnow


class ReminderType(str, Enum):
    """Kinds of scheduled care tasks."""
    WATERING = "watering"
    FERTILIZING = "fertilizing"
    PRUNING = "pruning"
    REPOTTING = "repotting"
    OTHER = "other"


class Reminder(BaseModel):
    """
    Scheduled care task with a due date and completion flag.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: Optional[int] = None
    plant_id: int
    user_id: int
    reminder_type: ReminderType
    due_date: datetime
    completed: bool = False
    created_at: datetime = Field(default_factory=utcnow)
    completed_at: Optional[datetime] = None

    @field_validator("due_date", "created_at", "completed_at")
    @classmethod
    def normalize_timestamps(cls, v: Optional[datetime]) -> Optional[datetime]:
        return ensure_utc(v)

    def complete(self, completed_at: Optional[datetime] = None) -> None:
        """
        Mark the reminder as done.

        Completing an already completed reminder keeps the original completion time.
        """
        if self.completed:
            return
        self.completed = True
        self.completed_at = completed_at or utcnow()
