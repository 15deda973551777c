from .recommendations import recommendations_router

__all__ = ["recommendations_router"]
