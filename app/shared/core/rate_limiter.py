"""
Rate limiting for the plant tracker API.
Per-client limits keyed by remote address using slowapi.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from ..config.settings import get_settings

settings = get_settings()

limiter = Limiter(
    key_func=get_remote_address,
    enabled=settings.RATE_LIMIT_ENABLED,
)


def recommendation_rate_limit() -> str:
    """Limit string for the recommendation generator, e.g. ``10/minute``."""
    return get_settings().RECOMMENDATION_RATE_LIMIT
