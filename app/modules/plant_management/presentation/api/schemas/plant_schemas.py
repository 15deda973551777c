# 📄 File: app/modules/plant_management/presentation/api/schemas/plant_schemas.py
# 🧭 Purpose (Layman Explanation):
# Defines what the app sends when adding or editing a plant, and what the API sends back,
# including "how thirsty is this plant" information worked out on the fly.
# 🧪 Purpose (Technical Summary):
# Pydantic request/response schemas for plant endpoints. Responses carry derived
# watering fields (status, days since watered, next watering date) computed at read time.
# 🔗 Dependencies:
# pydantic, plant domain model, watering_service
# 🔄 Connected Modules / Calls From:
# app.modules.plant_management.presentation.api.v1.plants

from datetime import datetime
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.modules.plant_management.domain.models.plant import LightNeeds, Plant, WateringStatus
from app.modules.plant_management.domain.services.watering_service import (
    days_since_watered,
    get_watering_status,
    next_watering_date,
)

# Fields that may be omitted from an update but never set to null
NON_NULLABLE_UPDATE_FIELDS = ("name", "water_frequency", "light_needs")


def _clean_name(v: Optional[str]) -> Optional[str]:
    if v is None:
        return v
    v = v.strip()
    if not v:
        raise ValueError("Plant name cannot be blank")
    return v


class PlantCreateRequest(BaseModel):
    """Request body for adding a plant."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "name": "Living room monstera",
                    "species": "Monstera deliciosa",
                    "water_frequency": 7,
                    "light_needs": "bright-indirect",
                    "care_notes": "Wipe leaves monthly",
                }
            ]
        }
    )

    name: str = Field(..., min_length=1, max_length=255, description="Name for the plant")
    species: Optional[str] = Field(None, max_length=255, description="Species or botanical name")
    image_url: Optional[str] = Field(None, description="Photo URL")
    water_frequency: Optional[int] = Field(
        None,
        ge=1,
        le=365,
        description="Watering interval in days (suggested from the name when omitted)",
    )
    light_needs: LightNeeds = Field(..., description="Light requirement")
    care_notes: Optional[str] = Field(None, max_length=2000)
    last_watered: Optional[datetime] = Field(None, description="Last watering time, if known")

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        return _clean_name(v)


class PlantUpdateRequest(BaseModel):
    """
    Partial update for a plant. Only fields present in the body are changed.
    """

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    species: Optional[str] = Field(None, max_length=255)
    image_url: Optional[str] = None
    water_frequency: Optional[int] = Field(None, ge=1, le=365)
    light_needs: Optional[LightNeeds] = None
    care_notes: Optional[str] = Field(None, max_length=2000)
    last_watered: Optional[datetime] = None

    @field_validator(*NON_NULLABLE_UPDATE_FIELDS, mode="before")
    @classmethod
    def reject_null(cls, v, info):
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return v

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: Optional[str]) -> Optional[str]:
        return _clean_name(v)


class PlantResponse(BaseModel):
    """Plant with derived watering information."""

    id: int
    user_id: int
    name: str
    species: Optional[str] = None
    image_url: Optional[str] = None
    water_frequency: int
    light_needs: LightNeeds
    care_notes: Optional[str] = None
    created_at: datetime
    last_watered: Optional[datetime] = None
    watering_status: WateringStatus
    days_since_watered: Optional[int] = None
    next_watering_date: Optional[datetime] = None

    @classmethod
    def from_domain(cls, plant: Plant, now: Optional[datetime] = None) -> "PlantResponse":
        return cls(
            **plant.model_dump(),
            watering_status=get_watering_status(plant.last_watered, plant.water_frequency, now),
            days_since_watered=days_since_watered(plant.last_watered, now),
            next_watering_date=next_watering_date(plant.last_watered, plant.water_frequency),
        )


class WateringSummaryResponse(BaseModel):
    """Number of plants in each watering status."""

    total: int
    counts: Dict[WateringStatus, int]


class WateringFrequencyResponse(BaseModel):
    name: str
    species: Optional[str] = None
    water_frequency: int = Field(..., description="Suggested watering interval in days")
