# 📄 File: app/modules/care_management/application/commands/log_care_activity.py
# 🧭 Purpose (Layman Explanation):
# The "I just cared for my plant" request: which plant, what was done, and when.
# 🧪 Purpose (Technical Summary):
# CQRS command for appending a care log entry.
# 🔗 Dependencies:
# pydantic, care_log domain model
# 🔄 Connected Modules / Calls From:
# LogCareActivityCommandHandler, care logs API

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from app.modules.care_management.domain.models.care_log import ActivityType


class LogCareActivityCommand(BaseModel):
    """
    Command for recording a care activity on a plant.
    """

    user_id: int
    plant_id: int
    activity_type: ActivityType
    notes: Optional[str] = Field(None, max_length=2000)
    performed_at: Optional[datetime] = None
