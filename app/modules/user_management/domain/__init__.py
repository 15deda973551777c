# 📄 File: app/modules/user_management/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the core rules for plant tracker users: who a user is and how a Supabase
# login becomes a user account.
# 🧪 Purpose (Technical Summary):
# Domain layer initialization re-exporting entities, services and repository interfaces.
# 🔗 Dependencies:
# Domain models, services, repositories from subpackages
# 🔄 Connected Modules / Calls From:
# Infrastructure layer, Presentation layer

from .models.user import AuthIdentity, User
from .repositories.user_repository import UserRepository
from .services.auth_service import AuthService, TokenVerifier
from .services.user_service import UserService

__all__ = [
    "AuthIdentity",
    "AuthService",
    "TokenVerifier",
    "User",
    "UserRepository",
    "UserService",
]
