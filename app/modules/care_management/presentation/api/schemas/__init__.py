from .care_schemas import (
    CalendarDayResponse,
    CalendarMonthResponse,
    CareLogCreateRequest,
    CareLogResponse,
    ReminderCreateRequest,
    ReminderResponse,
)

__all__ = [
    "CalendarDayResponse",
    "CalendarMonthResponse",
    "CareLogCreateRequest",
    "CareLogResponse",
    "ReminderCreateRequest",
    "ReminderResponse",
]
