# 📄 File: app/modules/user_management/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes everything about the people using the plant tracker: recognising their
# Supabase login and keeping a matching user account.
# 🧪 Purpose (Technical Summary):
# Package initialization for the user management module (domain-driven layout:
# domain, infrastructure, presentation). Authentication is delegated to Supabase Auth.
# 🔗 Dependencies:
# FastAPI, SQLAlchemy, supabase, python-jose, app.shared
# 🔄 Connected Modules / Calls From:
# app.api.v1.router, every module that needs the current user

"""
User Management Module

- Supabase Auth token verification (local JWT check or remote lookup)
- Just-in-time user provisioning with unique usernames
- Current-user endpoint
"""

from typing import Dict

__version__ = "1.0.0"
__module_name__ = "user_management"
__description__ = "Users and Supabase Auth delegation"


def get_module_info() -> Dict[str, str]:
    """
    Get basic module information.

    Returns:
        Module information dictionary
    """
    return {
        "name": __module_name__,
        "version": __version__,
        "description": __description__
    }


__all__ = [
    "__version__",
    "__module_name__",
    "__description__",
    "get_module_info",
]
