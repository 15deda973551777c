from .care_logs import care_logs_router, plant_care_router
from .reminders import reminders_router

__all__ = ["care_logs_router", "plant_care_router", "reminders_router"]
