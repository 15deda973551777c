"""
Core utilities package for the plant tracker.
Provides the exception hierarchy and the rate limiter.
"""

from .exceptions import (
    AuthenticationError,
    AuthorizationError,
    DatabaseError,
    NotFoundError,
    PlantCareException,
    RateLimitError,
    ValidationError,
)

__all__ = [
    "AuthenticationError",
    "AuthorizationError",
    "DatabaseError",
    "NotFoundError",
    "PlantCareException",
    "RateLimitError",
    "ValidationError",
]
