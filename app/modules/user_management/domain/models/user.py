# 📄 File: app/modules/user_management/domain/models/user.py
# 🧭 Purpose (Layman Explanation):
# Defines what a "user" is in the plant tracker: the person behind a Supabase login,
# with a username shown in the app and an optional email address.
# 🧪 Purpose (Technical Summary):
# Domain models for the application user and for the verified identity handed over
# by Supabase Auth, which is resolved (or provisioned) into an application user.
# 🔗 Dependencies:
# pydantic, datetime, typing, app.shared.utils.helpers
# 🔄 Connected Modules / Calls From:
# user_service.py, user_repository.py, supabase_auth.py, presentation dependencies

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.shared.utils.helpers import utcnow


class User(BaseModel):
    """
    User domain model representing a plant tracker user.

    Authentication itself is delegated to Supabase Auth; the application
    only keeps the link (``supabase_auth_id``) plus a display username.
    Every plant, care log, reminder and recommendation belongs to one user.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: Optional[int] = None
    supabase_auth_id: str = Field(..., min_length=1)
    username: str = Field(..., min_length=1, max_length=255)
    email: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        v = v.strip()
        return v or None

    def owns(self, resource_user_id: int) -> bool:
        """Check whether a resource with the given owner id belongs to this user."""
        return self.id is not None and self.id == resource_user_id


class AuthIdentity(BaseModel):
    """Identity verified by Supabase Auth (JWT ``sub`` and ``email`` claims)."""

    auth_id: str = Field(..., min_length=1)
    email: Optional[str] = None
