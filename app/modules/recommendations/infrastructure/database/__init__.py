from .models import RecommendationModel
from .recommendation_repository_impl import RecommendationRepositoryImpl

__all__ = ["RecommendationModel", "RecommendationRepositoryImpl"]
