# 📄 File: app/modules/plant_management/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# Defines how plants are stored in the database table "plants".
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM model for user plants with owner foreign key and watering metadata.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - app.shared.config.database (DatabaseBase)
#
# 🔄 Connected Modules / Calls From:
# - plant_repository_impl.py (CRUD operations)
# - care log, reminder and recommendation models (foreign keys to plants.id)
# - migrations/versions (schema generation)

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, func

from app.shared.config.database import DatabaseBase


# =============================================================================
# PLANT MODEL
# =============================================================================

class PlantModel(DatabaseBase):
    """
    SQLAlchemy model for a plant in a user's collection.
    """
    __tablename__ = "plants"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="Owning user"
    )
    name = Column(String(255), nullable=False, comment="User's name for the plant")
    species = Column(String(255), nullable=True, comment="Species or botanical name")
    image_url = Column(Text, nullable=True, comment="Photo URL")
    water_frequency = Column(Integer, nullable=False, comment="Watering interval in days")
    light_needs = Column(
        String(20),
        nullable=False,
        comment="low, medium, bright-indirect or full-sun"
    )
    care_notes = Column(Text, nullable=True)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    last_watered = Column(
        DateTime(timezone=True),
        nullable=True,
        comment="Time of the most recent watering care log"
    )

    def __repr__(self) -> str:
        return f"<PlantModel(id={self.id}, name={self.name}, user_id={self.user_id})>"
