"""
Infrastructure layer package for the plant tracker.
Provides database connections and session management.
"""

__all__ = []
