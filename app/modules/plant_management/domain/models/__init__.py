from .plant import LightNeeds, Plant, WateringStatus

__all__ = ["LightNeeds", "Plant", "WateringStatus"]
