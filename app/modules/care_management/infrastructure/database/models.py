# 📄 File: app/modules/care_management/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# Defines how care diary entries and reminders are stored in the database.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM models for the care_logs and reminders tables. Both reference their
# plant and owner; rows are removed together with the plant.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - app.shared.config.database (DatabaseBase)
#
# 🔄 Connected Modules / Calls From:
# - care_log_repository_impl.py, reminder_repository_impl.py
# - migrations/versions (schema generation)

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Index, Integer, String, Text, false, func

from app.shared.config.database import DatabaseBase


# =============================================================================
# CARE LOG MODEL
# =============================================================================

class CareLogModel(DatabaseBase):
    """
    SQLAlchemy model for performed care activities. Rows are append-only.
    """
    __tablename__ = "care_logs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    plant_id = Column(
        Integer,
        ForeignKey("plants.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    activity_type = Column(
        String(20),
        nullable=False,
        comment="watering, fertilizing, pruning, repotting or misting"
    )
    notes = Column(Text, nullable=True)
    performed_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        comment="When the care was performed"
    )

    def __repr__(self) -> str:
        return f"<CareLogModel(id={self.id}, plant_id={self.plant_id}, activity_type={self.activity_type})>"


# =============================================================================
# REMINDER MODEL
# =============================================================================

class ReminderModel(DatabaseBase):
    """
    SQLAlchemy model for scheduled care tasks.
    """
    __tablename__ = "reminders"
    __table_args__ = (
        Index("ix_reminders_user_due", "user_id", "due_date"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    plant_id = Column(
        Integer,
        ForeignKey("plants.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    reminder_type = Column(
        String(20),
        nullable=False,
        comment="watering, fertilizing, pruning, repotting or other"
    )
    due_date = Column(DateTime(timezone=True), nullable=False)
    completed = Column(Boolean, nullable=False, default=False, server_default=false())
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    completed_at = Column(DateTime(timezone=True), nullable=True)

    def __repr__(self) -> str:
        return f"<ReminderModel(id={self.id}, plant_id={self.plant_id}, due_date={self.due_date})>"
