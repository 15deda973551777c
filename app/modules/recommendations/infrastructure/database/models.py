# 📄 File: app/modules/recommendations/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# Defines how saved care tips are stored in the database table "ai_recommendations".
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM model for generated care recommendations. Tags are stored as a JSON
# array; the plant reference is nulled when the plant is deleted.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM (JSON type)
# - app.shared.config.database (DatabaseBase)
#
# 🔄 Connected Modules / Calls From:
# - recommendation_repository_impl.py
# - migrations/versions (schema generation)

from sqlalchemy import JSON, Boolean, Column, DateTime, ForeignKey, Integer, String, Text, false, func

from app.shared.config.database import DatabaseBase


class RecommendationModel(DatabaseBase):
    """
    SQLAlchemy model for stored care recommendations.
    """
    __tablename__ = "ai_recommendations"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    plant_id = Column(
        Integer,
        ForeignKey("plants.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
        comment="Plant the recommendation was generated for, if any"
    )
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False, comment="Markdown care guide")
    tags = Column(JSON, nullable=False, default=list, comment="Topic tags")
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    read = Column(Boolean, nullable=False, default=False, server_default=false())

    def __repr__(self) -> str:
        return f"<RecommendationModel(id={self.id}, title={self.title})>"
