from .care_log_repository import CareLogRepository
from .reminder_repository import ReminderRepository

__all__ = ["CareLogRepository", "ReminderRepository"]
