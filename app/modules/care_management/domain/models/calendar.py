# 📄 File: app/modules/care_management/domain/models/calendar.py
# 🧭 Purpose (Layman Explanation):
# Describes a month-view calendar: weeks from Sunday to Saturday, with each day holding
# the plant reminders due that day.
# 🧪 Purpose (Technical Summary):
# Read models for the reminder calendar grid (padded to whole weeks, Sunday first).
# 🔗 Dependencies:
# pydantic, datetime
# 🔄 Connected Modules / Calls From:
# reminder_service.py (build_calendar), reminders API

from datetime import date
from typing import List

from pydantic import BaseModel, Field

from .reminder import Reminder


class CalendarDay(BaseModel):
    day: date
    in_month: bool
    is_today: bool = False
    reminders: List[Reminder] = Field(default_factory=list)


class CalendarMonth(BaseModel):
    year: int
    month: int
    weeks: List[List[CalendarDay]]
