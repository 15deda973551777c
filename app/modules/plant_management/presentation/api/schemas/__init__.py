from .plant_schemas import (
    PlantCreateRequest,
    PlantResponse,
    PlantUpdateRequest,
    WateringFrequencyResponse,
    WateringSummaryResponse,
)

__all__ = [
    "PlantCreateRequest",
    "PlantResponse",
    "PlantUpdateRequest",
    "WateringFrequencyResponse",
    "WateringSummaryResponse",
]
