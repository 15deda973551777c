# 📄 File: app/modules/user_management/presentation/api/v1/users.py
# 🧭 Purpose (Layman Explanation):
# The web endpoint that tells the app who is currently signed in.
#
# 🧪 Purpose (Technical Summary):
# FastAPI router for user endpoints. Authentication is handled by the
# ``get_current_user`` dependency (Supabase Auth delegation).
#
# 🔗 Dependencies:
# - FastAPI router
# - app.modules.user_management.presentation.dependencies
# - app.modules.user_management.presentation.api.schemas.user_schemas
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (router inclusion under /users)

import logging

from fastapi import APIRouter, Depends

from app.modules.user_management.domain.models.user import User
from app.modules.user_management.presentation.api.schemas.user_schemas import UserResponse
from app.modules.user_management.presentation.dependencies import get_current_user

logger = logging.getLogger(__name__)

users_router = APIRouter()


@users_router.get(
    "/me",
    response_model=UserResponse,
    summary="Get current user information",
    description="Get the authenticated user's account, provisioning it on first sign-in",
    responses={
        200: {"description": "Current user information"},
        401: {"description": "Authentication required"},
    }
)
async def get_current_user_info(current_user: User = Depends(get_current_user)) -> UserResponse:
    """
    Get current authenticated user's information.

    Args:
        current_user: Injected current user

    Returns:
        UserResponse: Current user information
    """
    return UserResponse.from_domain(current_user)
