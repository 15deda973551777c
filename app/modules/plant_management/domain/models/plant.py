# 📄 File: app/modules/plant_management/domain/models/plant.py
# 🧭 Purpose (Layman Explanation):
# Defines what a plant is in the tracker: its name, species, how often it needs water,
# how much light it likes, and when it was last watered.
# 🧪 Purpose (Technical Summary):
# Plant domain entity with light-needs and watering-status enumerations, ownership
# check and watering bookkeeping.
# 🔗 Dependencies:
# pydantic, datetime, enum, app.shared.utils.helpers
# 🔄 Connected Modules / Calls From:
# plant_service.py, watering_service.py, plant repositories, care_management services

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.shared.utils.helpers import ensure_utc, utcnow


class LightNeeds(str, Enum):
    """How much light a plant wants."""
    LOW = "low"
    MEDIUM = "medium"
    BRIGHT_INDIRECT = "bright-indirect"
    FULL_SUN = "full-sun"


class WateringStatus(str, Enum):
    """Watering urgency derived from last watering and frequency."""
    UNKNOWN = "unknown"     # Never watered
    OVERDUE = "overdue"     # Two or more days past the interval
    DUE = "due"             # Interval reached
    SOON = "soon"           # One day before the interval
    OK = "ok"


class Plant(BaseModel):
    """
    Plant domain model.

    ``water_frequency`` is the watering interval in whole days.
    ``last_watered`` is updated whenever a watering care log is recorded.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: Optional[int] = None
    user_id: int
    name: str = Field(..., min_length=1, max_length=255)
    species: Optional[str] = Field(None, max_length=255)
    image_url: Optional[str] = None
    water_frequency: int = Field(..., ge=1)
    light_needs: LightNeeds
    care_notes: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow)
    last_watered: Optional[datetime] = None

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Plant name cannot be blank")
        return v

    @field_validator("created_at", "last_watered")
    @classmethod
    def normalize_timestamps(cls, v: Optional[datetime]) -> Optional[datetime]:
        return ensure_utc(v)

    def is_owned_by(self, user_id: int) -> bool:
        return self.user_id == user_id

    def record_watering(self, watered_at: datetime) -> None:
        """Mark the plant as watered at the given moment."""
        self.last_watered = watered_at
