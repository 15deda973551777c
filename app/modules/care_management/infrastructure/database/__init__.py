from .care_log_repository_impl import CareLogRepositoryImpl
from .models import CareLogModel, ReminderModel
from .reminder_repository_impl import ReminderRepositoryImpl

__all__ = ["CareLogModel", "CareLogRepositoryImpl", "ReminderModel", "ReminderRepositoryImpl"]
