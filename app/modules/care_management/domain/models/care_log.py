# 📄 File: app/modules/care_management/domain/models/care_log.py
# 🧭 Purpose (Layman Explanation):
# A care log is a diary entry saying "I watered / fertilized / pruned this plant at this time".
# Once written, it is never changed.
# 🧪 Purpose (Technical Summary):
# Immutable (frozen) CareLog domain entity and the ActivityType enumeration.
# 🔗 Dependencies:
# pydantic, datetime, enum, app.shared.utils.helpers
# 🔄 Connected Modules / Calls From:
# care_service.py, care log repositories, log-care-activity command handler

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.shared.utils.helpers import ensure_utc, utcnow


class ActivityType(str, Enum):
    """Kinds of care a user can log."""
    WATERING = "watering"
    FERTILIZING = "fertilizing"
    PRUNING = "pruning"
    REPOTTING = "repotting"
    MISTING = "misting"


class CareLog(BaseModel):
    """Record of a performed care activity. Immutable once written."""

    model_config = ConfigDict(frozen=True)

    id: Optional[int] = None
    plant_id: int
    user_id: int
    activity_type: ActivityType
    notes: Optional[str] = None
    performed_at: datetime = Field(default_factory=utcnow)

    @field_validator("performed_at")
    @classmethod
    def normalize_performed_at(cls, v: datetime) -> datetime:
        return ensure_utc(v)

    @property
    def is_watering(self) -> bool:
        return self.activity_type == ActivityType.WATERING
