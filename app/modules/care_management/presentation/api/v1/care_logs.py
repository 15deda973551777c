# 📄 File: app/modules/care_management/presentation/api/v1/care_logs.py
# 🧭 Purpose (Layman Explanation):
# The web endpoints for the plant care diary: write down care you did, and read it back.
# 🧪 Purpose (Technical Summary):
# FastAPI routers for care logs: ``/care-logs`` (create, list all) and the per-plant
# ``/plants/{plant_id}/care-logs`` and ``/plants/{plant_id}/reminders`` listings.
# 🔗 Dependencies:
# FastAPI, care schemas, care dependencies, user_management get_current_user
# 🔄 Connected Modules / Calls From:
# app.api.v1.router

import logging
from typing import List

from fastapi import APIRouter, Depends, status

from app.modules.care_management.application.commands.log_care_activity import LogCareActivityCommand
from app.modules.care_management.application.handlers.command_handlers import LogCareActivityCommandHandler
from app.modules.care_management.domain.services.care_service import CareService
from app.modules.care_management.domain.services.reminder_service import ReminderService
from app.modules.care_management.presentation.api.schemas.care_schemas import (
    CareLogCreateRequest,
    CareLogResponse,
    ReminderResponse,
)
from app.modules.care_management.presentation.dependencies import (
    get_care_service,
    get_log_care_activity_handler,
    get_reminder_service,
)
from app.modules.user_management.domain.models.user import User
from app.modules.user_management.presentation.dependencies import get_current_user

logger = logging.getLogger(__name__)

care_logs_router = APIRouter()
plant_care_router = APIRouter()


@care_logs_router.post(
    "",
    response_model=CareLogResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Log a care activity",
    description="Record care performed on a plant. Watering also updates the plant and schedules the next reminder.",
    responses={
        403: {"description": "Plant belongs to another user"},
        404: {"description": "Plant not found"},
    },
)
async def create_care_log(
    request_data: CareLogCreateRequest,
    current_user: User = Depends(get_current_user),
    handler: LogCareActivityCommandHandler = Depends(get_log_care_activity_handler),
) -> CareLogResponse:
    command = LogCareActivityCommand(user_id=current_user.id, **request_data.model_dump())
    care_log = await handler.handle(command)
    return CareLogResponse.model_validate(care_log)


@care_logs_router.get(
    "",
    response_model=List[CareLogResponse],
    summary="List care logs",
    description="All of the current user's care logs, newest first",
)
async def list_care_logs(
    current_user: User = Depends(get_current_user),
    care_service: CareService = Depends(get_care_service),
) -> List[CareLogResponse]:
    care_logs = await care_service.list_user_logs(current_user.id)
    return [CareLogResponse.model_validate(care_log) for care_log in care_logs]


# =========================================================================
# PER-PLANT LISTINGS (mounted under /plants)
# =========================================================================

@plant_care_router.get(
    "/{plant_id}/care-logs",
    response_model=List[CareLogResponse],
    summary="List a plant's care logs",
    responses={
        403: {"description": "Plant belongs to another user"},
        404: {"description": "Plant not found"},
    },
)
async def list_plant_care_logs(
    plant_id: int,
    current_user: User = Depends(get_current_user),
    care_service: CareService = Depends(get_care_service),
) -> List[CareLogResponse]:
    care_logs = await care_service.list_plant_logs(plant_id, current_user.id)
    return [CareLogResponse.model_validate(care_log) for care_log in care_logs]


@plant_care_router.get(
    "/{plant_id}/reminders",
    response_model=List[ReminderResponse],
    summary="List a plant's reminders",
    responses={
        403: {"description": "Plant belongs to another user"},
        404: {"description": "Plant not found"},
    },
)
async def list_plant_reminders(
    plant_id: int,
    current_user: User = Depends(get_current_user),
    reminder_service: ReminderService = Depends(get_reminder_service),
) -> List[ReminderResponse]:
    reminders = await reminder_service.list_plant_reminders(plant_id, current_user.id)
    return [ReminderResponse.model_validate(reminder) for reminder in reminders]
