# 📄 File: app/modules/recommendations/domain/models/recommendation.py
# 🧭 Purpose (Layman Explanation):
# A saved care tip sheet for the user, optionally tied to one of their plants, that can
# be marked as read.
# 🧪 Purpose (Technical Summary):
# Recommendation domain entity (title, markdown content, tags, read flag).
# 🔗 Dependencies:
# pydantic, datetime, app.shared.utils.helpers
# 🔄 Connected Modules / Calls From:
# recommendation_service.py, recommendation repositories, recommendations API

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.shared.utils.helpers import ensure_utc, utcnow


class Recommendation(BaseModel):
    """
    Stored care recommendation.

    ``plant_id`` is cleared when the plant it was generated for is deleted.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: Optional[int] = None
    user_id: int
    plant_id: Optional[int] = None
    title: str = Field(..., min_length=1)
    content: str
    tags: List[str] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
    read: bool = False

    @field_validator("created_at", "updated_at")
    @classmethod
    def normalize_timestamps(cls, v: datetime) -> datetime:
        return ensure_utc(v)

    def mark_read(self, when: Optional[datetime] = None) -> None:
        if self.read:
            return
        self.read = True
        self.updated_at = when or utcnow()
