# 📄 File: app/modules/recommendations/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the core rules for the built-in plant care tips.
# 🧪 Purpose (Technical Summary):
# Domain layer initialization re-exporting the Recommendation entity, repository
# interface and services.
# 🔗 Dependencies:
# Domain models, services, repositories from subpackages
# 🔄 Connected Modules / Calls From:
# Application, infrastructure and presentation layers; plant deletion handler

from .models.recommendation import Recommendation
from .repositories.recommendation_repository import RecommendationRepository
from .services.recommendation_service import RecommendationService

__all__ = ["Recommendation", "RecommendationRepository", "RecommendationService"]
