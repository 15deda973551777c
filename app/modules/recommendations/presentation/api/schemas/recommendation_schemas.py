# 📄 File: app/modules/recommendations/presentation/api/schemas/recommendation_schemas.py
# 🧭 Purpose (Layman Explanation):
# Defines what the app sends to ask for care tips and what saved tips look like when
# the API sends them back.
# 🧪 Purpose (Technical Summary):
# Pydantic request/response schemas for recommendation endpoints.
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# app.modules.recommendations.presentation.api.v1.recommendations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class GenerateRecommendationRequest(BaseModel):
    """Request body for generating a care recommendation."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "plant_id": 1,
                    "plant_name": "Monstera",
                    "plant_species": "Monstera deliciosa",
                    "care_issue": "yellow leaves",
                    "plant_description": "Sits by a south window, and I sometimes forget to water",
                }
            ]
        }
    )

    plant_id: Optional[int] = Field(None, description="Plant to attach the recommendation to")
    plant_name: str = Field(..., min_length=1, max_length=255)
    plant_species: Optional[str] = Field(None, max_length=255)
    care_issue: Optional[str] = Field(None, max_length=500)
    plant_description: Optional[str] = Field(None, max_length=2000)


class RecommendationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    plant_id: Optional[int] = None
    title: str
    content: str = Field(..., description="Markdown care guide")
    tags: List[str]
    created_at: datetime
    updated_at: datetime
    read: bool


class CareInstructionsResponse(BaseModel):
    plant_name: str
    plant_species: Optional[str] = None
    instructions: str = Field(..., description="Markdown care instructions")
