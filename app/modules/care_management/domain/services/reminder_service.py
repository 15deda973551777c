# 📄 File: app/modules/care_management/domain/services/reminder_service.py
# 🧭 Purpose (Layman Explanation):
# Looks after plant reminders: schedules the next watering, lists what is coming up or
# already late, ticks reminders off, and lays them out on a month calendar.
# 🧪 Purpose (Technical Summary):
# Domain service for reminder scheduling and queries. Watering reminders are due
# ``now + water_frequency days``; completion is owner-checked and idempotent; the
# calendar view is a Sunday-first month grid padded to whole weeks.
# 🔗 Dependencies:
# Reminder and calendar models, ReminderRepository, plant_management PlantService,
# app.shared.utils.helpers, calendar (stdlib)
# 🔄 Connected Modules / Calls From:
# plant creation and care logging command handlers, reminders API

import calendar
import logging
from collections import defaultdict
from datetime import date, datetime, timedelta
from typing import Dict, List, Optional

from app.modules.plant_management.domain.models.plant import Plant
from app.modules.plant_management.domain.services.plant_service import PlantService
from app.shared.core.exceptions import AuthorizationError, ReminderNotFoundError, ValidationError
from app.shared.utils.helpers import add_days, ensure_utc, utcnow
from app.shared.utils.logging import get_logger

from ..models.calendar import CalendarDay, CalendarMonth
from ..models.reminder import Reminder, ReminderType
from ..repositories.reminder_repository import ReminderRepository

logger = logging.getLogger(__name__)
audit_logger = get_logger("care_management.audit")

# Calendar weeks start on Sunday
WEEK_START = calendar.SUNDAY


class ReminderService:
    """
    Domain service for reminder business logic.
    """

    def __init__(self, reminder_repository: ReminderRepository, plant_service: PlantService):
        self._reminder_repository = reminder_repository
        self._plant_service = plant_service

    # =========================================================================
    # SCHEDULING
    # =========================================================================

    async def schedule_watering(self, plant: Plant, now: Optional[datetime] = None) -> Reminder:
        """
        Schedule the next watering reminder for a plant.

        The reminder is due ``water_frequency`` days from now.
        """
        reference = ensure_utc(now) if now is not None else utcnow()
        reminder = await self._reminder_repository.create(
            Reminder(
                plant_id=plant.id,
                user_id=plant.user_id,
                reminder_type=ReminderType.WATERING,
                due_date=add_days(reference, plant.water_frequency),
            )
        )
        logger.info(f"⏰ Watering reminder for plant {plant.id} due {reminder.due_date.isoformat()}")
        return reminder

    async def create_reminder(
        self,
        user_id: int,
        plant_id: int,
        reminder_type: ReminderType,
        due_date: datetime,
    ) -> Reminder:
        """
        Create a reminder for one of the user's plants.

        Raises:
            PlantNotFoundError / AuthorizationError: via PlantService
        """
        plant = await self._plant_service.get_owned_plant(plant_id, user_id)
        reminder = await self._reminder_repository.create(
            Reminder(
                plant_id=plant.id,
                user_id=user_id,
                reminder_type=reminder_type,
                due_date=due_date,
            )
        )
        audit_logger.log_user_action("create_reminder", user_id, resource=f"reminder:{reminder.id}")
        return reminder

    async def complete_reminder(self, reminder_id: int, user_id: int, now: Optional[datetime] = None) -> Reminder:
        """
        Mark a reminder as completed.

        Raises:
            ReminderNotFoundError: If the reminder does not exist
            AuthorizationError: If the reminder belongs to another user
        """
        reminder = await self._reminder_repository.get_by_id(reminder_id)
        if reminder is None:
            raise ReminderNotFoundError(reminder_id)
        if reminder.user_id != user_id:
            logger.warning(f"User {user_id} denied access to reminder {reminder_id}")
            raise AuthorizationError(
                "You do not have access to this reminder",
                resource_type="reminder",
                resource_id=reminder_id,
            )

        if reminder.completed:
            return reminder

        reminder.complete(now)
        updated = await self._reminder_repository.update(reminder)
        audit_logger.log_business_event(
            "reminder_completed",
            f"✅ Reminder {reminder_id} completed",
            entity_id=reminder_id,
            entity_type="reminder",
        )
        return updated

    # =========================================================================
    # QUERIES
    # =========================================================================

    async def list_reminders(self, user_id: int) -> List[Reminder]:
        """All of a user's reminders by due date ascending."""
        return await self._reminder_repository.list_by_user(user_id)

    async def list_plant_reminders(self, plant_id: int, user_id: int) -> List[Reminder]:
        await self._plant_service.get_owned_plant(plant_id, user_id)
        return await self._reminder_repository.list_by_plant(plant_id)

    async def list_upcoming(
        self,
        user_id: int,
        days: Optional[int] = None,
        now: Optional[datetime] = None,
    ) -> List[Reminder]:
        """
        Open reminders due from now on, by due date ascending.

        Args:
            user_id: Owner id
            days: Only reminders due within this many days (None = no limit)
            now: Reference time (defaults to now)
        """
        reference = ensure_utc(now) if now is not None else utcnow()
        end = add_days(reference, days) if days is not None else None
        return await self._reminder_repository.list_due_between(
            user_id, start=reference, end=end, completed=False
        )

    async def list_overdue(self, user_id: int, now: Optional[datetime] = None) -> List[Reminder]:
        """Open reminders whose due date has passed."""
        reference = ensure_utc(now) if now is not None else utcnow()
        return await self._reminder_repository.list_due_between(
            user_id, end=reference, completed=False
        )

    async def build_calendar(
        self,
        user_id: int,
        year: int,
        month: int,
        today: Optional[date] = None,
    ) -> CalendarMonth:
        """
        Build a month grid of the user's reminders.

        Weeks run Sunday to Saturday and are padded with days of the
        neighbouring months so every week is complete. Reminders are placed
        on the UTC date of their due date.

        Raises:
            ValidationError: If month is not 1-12
        """
        if not 1 <= month <= 12:
            raise ValidationError("Month must be between 1 and 12", field="month", value=month)

        weeks_of_dates = calendar.Calendar(firstweekday=WEEK_START).monthdatescalendar(year, month)
        grid_start = weeks_of_dates[0][0]
        grid_end = weeks_of_dates[-1][-1] + timedelta(days=1)

        reminders = await self._reminder_repository.list_due_between(
            user_id,
            start=_start_of_day(grid_start),
            end=_start_of_day(grid_end),
        )

        by_day: Dict[date, List[Reminder]] = defaultdict(list)
        for reminder in reminders:
            by_day[reminder.due_date.date()].append(reminder)

        today = today or utcnow().date()
        weeks = [
            [
                CalendarDay(
                    day=day,
                    in_month=day.month == month,
                    is_today=day == today,
                    reminders=by_day.get(day, []),
                )
                for day in week
            ]
            for week in weeks_of_dates
        ]
        return CalendarMonth(year=year, month=month, weeks=weeks)


def _start_of_day(day: date) -> datetime:
    return ensure_utc(datetime(day.year, day.month, day.day))
