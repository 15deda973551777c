from .recommendation_repository import RecommendationRepository

__all__ = ["RecommendationRepository"]
