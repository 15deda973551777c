from .calendar import CalendarDay, CalendarMonth
from .care_log import ActivityType, CareLog
from .reminder import Reminder, ReminderType

__all__ = [
    "ActivityType",
    "CalendarDay",
    "CalendarMonth",
    "CareLog",
    "Reminder",
    "ReminderType",
]
