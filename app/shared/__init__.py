# 📄 File: app/shared/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Marks the 'shared' folder as a package of common tools that every part of the
# plant tracker uses, like settings, database sessions and error types.
#
# 🧪 Purpose (Technical Summary):
# Shared kernel package for configuration, infrastructure and
# cross-cutting concerns used by all feature modules.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - All feature modules under app.modules

"""
Shared Kernel - Common Utilities and Infrastructure

- Configuration management (pydantic-settings)
- Database infrastructure (async SQLAlchemy)
- Exception hierarchy
- Structured logging and helpers
"""

__all__ = []
