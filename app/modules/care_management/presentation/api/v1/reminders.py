# 📄 File: app/modules/care_management/presentation/api/v1/reminders.py
# 🧭 Purpose (Layman Explanation):
# The web endpoints for plant reminders: see what is coming up or late, view a month
# calendar, add reminders and tick them off.
# 🧪 Purpose (Technical Summary):
# FastAPI router for reminder listing (all, upcoming, overdue), the month calendar,
# creation and idempotent completion. Static paths come before ``/{reminder_id}``.
# 🔗 Dependencies:
# FastAPI, care schemas, care dependencies, user_management get_current_user, settings
# 🔄 Connected Modules / Calls From:
# app.api.v1.router (mounted under /reminders)

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from app.modules.care_management.domain.services.reminder_service import ReminderService
from app.modules.care_management.presentation.api.schemas.care_schemas import (
    CalendarMonthResponse,
    ReminderCreateRequest,
    ReminderResponse,
)
from app.modules.care_management.presentation.dependencies import get_reminder_service
from app.modules.user_management.domain.models.user import User
from app.modules.user_management.presentation.dependencies import get_current_user
from app.shared.config.settings import get_settings
from app.shared.utils.helpers import utcnow

logger = logging.getLogger(__name__)

reminders_router = APIRouter()


@reminders_router.get(
    "",
    response_model=List[ReminderResponse],
    summary="List reminders",
    description="All of the current user's reminders by due date",
)
async def list_reminders(
    current_user: User = Depends(get_current_user),
    reminder_service: ReminderService = Depends(get_reminder_service),
) -> List[ReminderResponse]:
    reminders = await reminder_service.list_reminders(current_user.id)
    return [ReminderResponse.model_validate(reminder) for reminder in reminders]


@reminders_router.get(
    "/upcoming",
    response_model=List[ReminderResponse],
    summary="Upcoming reminders",
    description="Open reminders due from now on, optionally only within the next N days",
)
async def list_upcoming_reminders(
    days: Optional[int] = Query(None, ge=1, le=366, description="Only reminders due within this many days"),
    current_user: User = Depends(get_current_user),
    reminder_service: ReminderService = Depends(get_reminder_service),
) -> List[ReminderResponse]:
    window = days if days is not None else get_settings().UPCOMING_REMINDER_WINDOW_DAYS
    reminders = await reminder_service.list_upcoming(current_user.id, days=window)
    return [ReminderResponse.model_validate(reminder) for reminder in reminders]


@reminders_router.get(
    "/overdue",
    response_model=List[ReminderResponse],
    summary="Overdue reminders",
    description="Open reminders whose due date has passed",
)
async def list_overdue_reminders(
    current_user: User = Depends(get_current_user),
    reminder_service: ReminderService = Depends(get_reminder_service),
) -> List[ReminderResponse]:
    reminders = await reminder_service.list_overdue(current_user.id)
    return [ReminderResponse.model_validate(reminder) for reminder in reminders]


@reminders_router.get(
    "/calendar",
    response_model=CalendarMonthResponse,
    summary="Reminder calendar",
    description="Month grid of Sunday-first weeks with the reminders due each day (defaults to the current month)",
)
async def get_reminder_calendar(
    year: Optional[int] = Query(None, ge=1970, le=9999),
    month: Optional[int] = Query(None, ge=1, le=12),
    current_user: User = Depends(get_current_user),
    reminder_service: ReminderService = Depends(get_reminder_service),
) -> CalendarMonthResponse:
    today = utcnow().date()
    calendar_month = await reminder_service.build_calendar(
        current_user.id,
        year or today.year,
        month or today.month,
        today=today,
    )
    return CalendarMonthResponse.from_domain(calendar_month)


@reminders_router.post(
    "",
    response_model=ReminderResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a reminder",
    responses={
        403: {"description": "Plant belongs to another user"},
        404: {"description": "Plant not found"},
    },
)
async def create_reminder(
    request_data: ReminderCreateRequest,
    current_user: User = Depends(get_current_user),
    reminder_service: ReminderService = Depends(get_reminder_service),
) -> ReminderResponse:
    reminder = await reminder_service.create_reminder(
        current_user.id,
        request_data.plant_id,
        request_data.reminder_type,
        request_data.due_date,
    )
    return ReminderResponse.model_validate(reminder)


@reminders_router.post(
    "/{reminder_id}/complete",
    response_model=ReminderResponse,
    summary="Complete a reminder",
    description="Mark a reminder as done. Completing it again returns it unchanged.",
    responses={
        403: {"description": "Reminder belongs to another user"},
        404: {"description": "Reminder not found"},
    },
)
async def complete_reminder(
    reminder_id: int,
    current_user: User = Depends(get_current_user),
    reminder_service: ReminderService = Depends(get_reminder_service),
) -> ReminderResponse:
    reminder = await reminder_service.complete_reminder(reminder_id, current_user.id)
    return ReminderResponse.model_validate(reminder)
