# 📄 File: app/modules/care_management/presentation/api/schemas/care_schemas.py
# 🧭 Purpose (Layman Explanation):
# Defines what the app sends when logging care or creating a reminder, and what the API
# sends back for diary entries, reminders and the month calendar.
# 🧪 Purpose (Technical Summary):
# Pydantic request/response schemas for care log, reminder and calendar endpoints.
# 🔗 Dependencies:
# pydantic, care_management domain models
# 🔄 Connected Modules / Calls From:
# care_logs, reminders and plant_care routers

from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.modules.care_management.domain.models.calendar import CalendarMonth
from app.modules.care_management.domain.models.care_log import ActivityType
from app.modules.care_management.domain.models.reminder import ReminderType


# =============================================================================
# CARE LOGS
# =============================================================================

class CareLogCreateRequest(BaseModel):
    """Request body for logging a care activity."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"plant_id": 1, "activity_type": "watering", "notes": "Soil was bone dry"}
            ]
        }
    )

    plant_id: int = Field(..., description="Plant the care was performed on")
    activity_type: ActivityType
    notes: Optional[str] = Field(None, max_length=2000)
    performed_at: Optional[datetime] = Field(None, description="When the care happened (defaults to now)")


class CareLogResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    plant_id: int
    user_id: int
    activity_type: ActivityType
    notes: Optional[str] = None
    performed_at: datetime


# =============================================================================
# REMINDERS
# =============================================================================

class ReminderCreateRequest(BaseModel):
    """Request body for scheduling a reminder."""

    plant_id: int
    reminder_type: ReminderType
    due_date: datetime


class ReminderResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    plant_id: int
    user_id: int
    reminder_type: ReminderType
    due_date: datetime
    completed: bool
    created_at: datetime
    completed_at: Optional[datetime] = None


class CalendarDayResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    day: date
    in_month: bool
    is_today: bool
    reminders: List[ReminderResponse]


class CalendarMonthResponse(BaseModel):
    """Month grid of Sunday-to-Saturday weeks."""

    model_config = ConfigDict(from_attributes=True)

    year: int
    month: int
    weeks: List[List[CalendarDayResponse]]

    @classmethod
    def from_domain(cls, calendar_month: CalendarMonth) -> "CalendarMonthResponse":
        return cls.model_validate(calendar_month)
