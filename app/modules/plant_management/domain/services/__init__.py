from .plant_service import PlantService
from .watering_service import (
    days_since_watered,
    get_watering_status,
    next_watering_date,
    suggest_watering_frequency,
    summarize_watering,
)

__all__ = [
    "PlantService",
    "days_since_watered",
    "get_watering_status",
    "next_watering_date",
    "suggest_watering_frequency",
    "summarize_watering",
]
