from .care_guide_service import (
    CareGuide,
    basic_care_instructions,
    build_title,
    find_care_guide_key,
    generate_care_recommendation,
)
from .recommendation_service import RecommendationService

__all__ = [
    "CareGuide",
    "RecommendationService",
    "basic_care_instructions",
    "build_title",
    "find_care_guide_key",
    "generate_care_recommendation",
]
