from .care_service import CareService
from .reminder_service import ReminderService

__all__ = ["CareService", "ReminderService"]
