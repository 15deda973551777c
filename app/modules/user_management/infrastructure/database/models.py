# 📄 File: app/modules/user_management/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# Defines how user accounts are stored in the database table "users".
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM model for application users, keyed by an integer id and linked
# to Supabase Auth through a unique ``supabase_auth_id``.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - app.shared.config.database (DatabaseBase)
#
# 🔄 Connected Modules / Calls From:
# - user_repository_impl.py (CRUD operations)
# - Plant, care and recommendation models (foreign keys to users.id)
# - migrations/versions (schema generation)

from sqlalchemy import Column, DateTime, Integer, String, func

from app.shared.config.database import DatabaseBase


# =============================================================================
# USER MODEL
# =============================================================================

class UserModel(DatabaseBase):
    """
    SQLAlchemy model for plant tracker users.

    Credentials live in Supabase Auth; this table only maps an auth identity
    to the application user that owns plants, logs and reminders.
    """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    supabase_auth_id = Column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
        comment="Supabase Auth user id (JWT sub claim)"
    )
    username = Column(
        String(255),
        unique=True,
        nullable=False,
        comment="Display username, unique across the app"
    )
    email = Column(
        String(255),
        unique=True,
        nullable=True,
        comment="Email address reported by Supabase Auth"
    )
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        comment="Account creation date"
    )

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, username={self.username})>"
