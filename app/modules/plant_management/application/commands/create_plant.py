# 📄 File: app/modules/plant_management/application/commands/create_plant.py
# 🧭 Purpose (Layman Explanation):
# The "add a plant" request: everything needed to put a new plant in a user's collection.
# 🧪 Purpose (Technical Summary):
# CQRS command for plant creation. When no watering interval is given, one is suggested
# from the plant's name and species.
# 🔗 Dependencies:
# pydantic, plant domain model, watering_service
# 🔄 Connected Modules / Calls From:
# CreatePlantCommandHandler, plants API

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from app.modules.plant_management.domain.models.plant import LightNeeds
from app.modules.plant_management.domain.services.watering_service import suggest_watering_frequency
from app.shared.config.settings import get_settings


class CreatePlantCommand(BaseModel):
    """
    Command for adding a plant to a user's collection.
    """

    user_id: int
    name: str = Field(..., min_length=1, max_length=255)
    species: Optional[str] = Field(None, max_length=255)
    image_url: Optional[str] = None
    water_frequency: Optional[int] = Field(None, ge=1, description="Watering interval in days")
    light_needs: LightNeeds
    care_notes: Optional[str] = None
    last_watered: Optional[datetime] = None

    def resolved_water_frequency(self) -> int:
        if self.water_frequency is not None:
            return self.water_frequency
        return suggest_watering_frequency(
            self.name, self.species, default=get_settings().DEFAULT_WATER_FREQUENCY_DAYS
        )

    def to_plant_data(self) -> Dict[str, Any]:
        """Plant fields for PlantService.create_plant."""
        data = self.model_dump(exclude={"user_id"})
        data["water_frequency"] = self.resolved_water_frequency()
        return data
