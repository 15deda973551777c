# 📄 File: app/modules/user_management/infrastructure/__init__.py
# 🧭 Purpose (Layman Explanation):
# Holds the concrete pieces behind user accounts: the database table and the Supabase connection.
# 🧪 Purpose (Technical Summary):
# Infrastructure layer for user management (SQLAlchemy repository, Supabase Auth verifier).
# 🔗 Dependencies:
# SQLAlchemy, supabase, python-jose
# 🔄 Connected Modules / Calls From:
# app.modules.user_management.presentation.dependencies

"""
User Management Infrastructure Layer

- Database: SQLAlchemy model and repository implementation
- External: Supabase Auth token verification
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.modules.user_management.infrastructure.database.user_repository_impl import UserRepositoryImpl
    from app.modules.user_management.infrastructure.external.supabase_auth import SupabaseAuthService

__all__ = [
    "UserRepositoryImpl",
    "SupabaseAuthService",
]
