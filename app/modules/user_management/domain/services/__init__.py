from .auth_service import AuthService, TokenVerifier
from .user_service import UserService

__all__ = ["AuthService", "TokenVerifier", "UserService"]
