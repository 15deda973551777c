from .recommendation import Recommendation

__all__ = ["Recommendation"]
