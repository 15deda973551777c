# 📄 File: app/modules/user_management/presentation/api/schemas/user_schemas.py
# 🧭 Purpose (Layman Explanation):
# Defines what user information the API sends back to the app.
#
# 🧪 Purpose (Technical Summary):
# Pydantic response schema for the current-user endpoint.
#
# 🔗 Dependencies:
# - pydantic for schema validation and serialization
#
# 🔄 Connected Modules / Calls From:
# - app.modules.user_management.presentation.api.v1.users

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.modules.user_management.domain.models.user import User


class UserResponse(BaseModel):
    """User account information returned to its owner."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "id": 1,
                    "username": "ada",
                    "email": "ada@example.com",
                    "created_at": "2024-05-01T09:30:00Z",
                }
            ]
        }
    )

    id: int = Field(..., description="Application user id")
    username: str = Field(..., description="Display username")
    email: Optional[str] = Field(None, description="Email reported by Supabase Auth")
    created_at: datetime = Field(..., description="Account creation time (UTC)")

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            username=user.username,
            email=user.email,
            created_at=user.created_at,
        )
