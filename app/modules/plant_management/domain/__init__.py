# 📄 File: app/modules/plant_management/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the core rules about plants and their watering needs.
# 🧪 Purpose (Technical Summary):
# Domain layer initialization re-exporting the Plant entity, enums, repository
# interface and services.
# 🔗 Dependencies:
# Domain models, services, repositories from subpackages
# 🔄 Connected Modules / Calls From:
# Application, infrastructure and presentation layers; care_management; recommendations

from .models.plant import LightNeeds, Plant, WateringStatus
from .repositories.plant_repository import PlantRepository
from .services.plant_service import PlantService

__all__ = [
    "LightNeeds",
    "Plant",
    "PlantRepository",
    "PlantService",
    "WateringStatus",
]
