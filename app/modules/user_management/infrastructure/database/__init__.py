# 📄 File: app/modules/user_management/infrastructure/database/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the database pieces for user accounts: the table definition and the code
# that reads and writes it.
#
# 🧪 Purpose (Technical Summary):
# Database layer exports for user management (SQLAlchemy model and repository implementation).
#
# 🔗 Dependencies:
# - SQLAlchemy ORM models and sessions
#
# 🔄 Connected Modules / Calls From:
# - app.modules.user_management.presentation.dependencies
# - migrations/env.py (model registration)

from .models import UserModel
from .user_repository_impl import UserRepositoryImpl

__all__ = ["UserModel", "UserRepositoryImpl"]
