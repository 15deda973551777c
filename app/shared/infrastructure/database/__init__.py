"""
Database infrastructure: engine lifecycle and request-scoped sessions.
"""

from .connection import (
    close_database,
    database_health_check,
    db_manager,
    get_database_engine,
    initialize_database,
)
from .session import get_db_session, initialize_sessions, session_manager

__all__ = [
    "close_database",
    "database_health_check",
    "db_manager",
    "get_database_engine",
    "get_db_session",
    "initialize_database",
    "initialize_sessions",
    "session_manager",
]
