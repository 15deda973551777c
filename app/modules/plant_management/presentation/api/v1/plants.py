# 📄 File: app/modules/plant_management/presentation/api/v1/plants.py
# 🧭 Purpose (Layman Explanation):
# The web endpoints for a user's plants: list them, look at one, add, edit and remove
# plants, see how many need water, and get a suggested watering schedule.
# 🧪 Purpose (Technical Summary):
# FastAPI router for plant CRUD scoped to the authenticated user, watering summary and
# watering frequency suggestion. Static paths are declared before ``/{plant_id}``.
# 🔗 Dependencies:
# FastAPI, plant schemas, plant dependencies, user_management get_current_user
# 🔄 Connected Modules / Calls From:
# app.api.v1.router (mounted under /plants)

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from app.modules.plant_management.application.commands.create_plant import CreatePlantCommand
from app.modules.plant_management.application.commands.delete_plant import DeletePlantCommand
from app.modules.plant_management.application.handlers.command_handlers import (
    CreatePlantCommandHandler,
    DeletePlantCommandHandler,
)
from app.modules.plant_management.domain.models.plant import WateringStatus
from app.modules.plant_management.domain.services.plant_service import PlantService
from app.modules.plant_management.domain.services.watering_service import (
    suggest_watering_frequency,
    summarize_watering,
)
from app.modules.plant_management.presentation.api.schemas.plant_schemas import (
    PlantCreateRequest,
    PlantResponse,
    PlantUpdateRequest,
    WateringFrequencyResponse,
    WateringSummaryResponse,
)
from app.modules.plant_management.presentation.dependencies import (
    get_create_plant_handler,
    get_delete_plant_handler,
    get_plant_service,
)
from app.modules.user_management.domain.models.user import User
from app.modules.user_management.presentation.dependencies import get_current_user
from app.shared.config.settings import get_settings
from app.shared.utils.helpers import utcnow

logger = logging.getLogger(__name__)

plants_router = APIRouter()


# =========================================================================
# COLLECTION-LEVEL ENDPOINTS
# =========================================================================

@plants_router.get(
    "",
    response_model=List[PlantResponse],
    summary="List plants",
    description="List the current user's plants, newest first, optionally filtered by watering status",
)
async def list_plants(
    status_filter: Optional[WateringStatus] = Query(None, alias="status", description="Watering status filter"),
    current_user: User = Depends(get_current_user),
    plant_service: PlantService = Depends(get_plant_service),
) -> List[PlantResponse]:
    now = utcnow()
    plants = await plant_service.list_plants(current_user.id, status=status_filter, now=now)
    return [PlantResponse.from_domain(plant, now) for plant in plants]


@plants_router.get(
    "/watering-summary",
    response_model=WateringSummaryResponse,
    summary="Watering summary",
    description="Count the current user's plants in each watering status",
)
async def get_watering_summary(
    current_user: User = Depends(get_current_user),
    plant_service: PlantService = Depends(get_plant_service),
) -> WateringSummaryResponse:
    plants = await plant_service.list_plants(current_user.id)
    counts = summarize_watering(plants, utcnow())
    return WateringSummaryResponse(total=len(plants), counts=counts)


@plants_router.get(
    "/watering-frequency",
    response_model=WateringFrequencyResponse,
    summary="Suggest watering frequency",
    description="Suggest a watering interval in days from a plant name and species",
)
async def get_watering_frequency(
    name: str = Query(..., min_length=1, description="Plant name"),
    species: Optional[str] = Query(None, description="Plant species"),
    current_user: User = Depends(get_current_user),
) -> WateringFrequencyResponse:
    return WateringFrequencyResponse(
        name=name,
        species=species,
        water_frequency=suggest_watering_frequency(
            name, species, default=get_settings().DEFAULT_WATER_FREQUENCY_DAYS
        ),
    )


@plants_router.post(
    "",
    response_model=PlantResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a plant",
    description="Add a plant and schedule its first watering reminder",
    responses={
        201: {"description": "Plant created"},
        422: {"description": "Invalid plant data"},
    },
)
async def create_plant(
    request_data: PlantCreateRequest,
    current_user: User = Depends(get_current_user),
    handler: CreatePlantCommandHandler = Depends(get_create_plant_handler),
) -> PlantResponse:
    command = CreatePlantCommand(user_id=current_user.id, **request_data.model_dump())
    plant = await handler.handle(command)
    return PlantResponse.from_domain(plant)


# =========================================================================
# SINGLE PLANT ENDPOINTS
# =========================================================================

@plants_router.get(
    "/{plant_id}",
    response_model=PlantResponse,
    summary="Get a plant",
    responses={
        403: {"description": "Plant belongs to another user"},
        404: {"description": "Plant not found"},
    },
)
async def get_plant(
    plant_id: int,
    current_user: User = Depends(get_current_user),
    plant_service: PlantService = Depends(get_plant_service),
) -> PlantResponse:
    plant = await plant_service.get_owned_plant(plant_id, current_user.id)
    return PlantResponse.from_domain(plant)


@plants_router.put(
    "/{plant_id}",
    response_model=PlantResponse,
    summary="Update a plant",
    description="Partially update a plant; omitted fields are left unchanged",
    responses={
        403: {"description": "Plant belongs to another user"},
        404: {"description": "Plant not found"},
    },
)
async def update_plant(
    plant_id: int,
    request_data: PlantUpdateRequest,
    current_user: User = Depends(get_current_user),
    plant_service: PlantService = Depends(get_plant_service),
) -> PlantResponse:
    changes = request_data.model_dump(exclude_unset=True)
    plant = await plant_service.update_plant(plant_id, current_user.id, changes)
    return PlantResponse.from_domain(plant)


@plants_router.delete(
    "/{plant_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a plant",
    description="Delete a plant with its care logs and reminders; its recommendations are kept",
    responses={
        403: {"description": "Plant belongs to another user"},
        404: {"description": "Plant not found"},
    },
)
async def delete_plant(
    plant_id: int,
    current_user: User = Depends(get_current_user),
    handler: DeletePlantCommandHandler = Depends(get_delete_plant_handler),
) -> Response:
    await handler.handle(DeletePlantCommand(plant_id=plant_id, user_id=current_user.id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
