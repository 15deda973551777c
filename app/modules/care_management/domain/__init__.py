# 📄 File: app/modules/care_management/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the core rules for the plant care diary and reminders.
# 🧪 Purpose (Technical Summary):
# Domain layer initialization re-exporting care log / reminder entities,
# repository interfaces and services.
# 🔗 Dependencies:
# Domain models, services, repositories from subpackages
# 🔄 Connected Modules / Calls From:
# Application, infrastructure and presentation layers; plant_management handlers

from .models.care_log import ActivityType, CareLog
from .models.reminder import Reminder, ReminderType
from .repositories.care_log_repository import CareLogRepository
from .repositories.reminder_repository import ReminderRepository
from .services.care_service import CareService
from .services.reminder_service import ReminderService

__all__ = [
    "ActivityType",
    "CareLog",
    "CareLogRepository",
    "CareService",
    "Reminder",
    "ReminderRepository",
    "ReminderService",
    "ReminderType",
]
