from .recommendation_schemas import (
    CareInstructionsResponse,
    GenerateRecommendationRequest,
    RecommendationResponse,
)

__all__ = ["CareInstructionsResponse", "GenerateRecommendationRequest", "RecommendationResponse"]
