# 📄 File: app/api/v1/router.py
# 🧭 Purpose (Layman Explanation):
# Acts like a traffic director for API version 1, sending plant requests to the plant
# endpoints, reminder requests to the reminder endpoints, and so on.
# 🧪 Purpose (Technical Summary):
# API v1 router aggregation: mounts every module router under its prefix and exposes
# an API info endpoint.
# 🔗 Dependencies:
# FastAPI, module presentation routers
# 🔄 Connected Modules / Calls From:
# app.main (mounted under /api/v1)

import logging
from typing import Any, Dict

from fastapi import APIRouter

from app.modules.care_management.presentation.api.v1.care_logs import care_logs_router, plant_care_router
from app.modules.care_management.presentation.api.v1.reminders import reminders_router
from app.modules.plant_management.presentation.api.v1.plants import plants_router
from app.modules.recommendations.presentation.api.v1.recommendations import recommendations_router
from app.modules.user_management.presentation.api.v1.users import users_router

from . import API_TAGS, ROUTE_PREFIXES, get_api_info

logger = logging.getLogger(__name__)

api_v1_router = APIRouter()

# Plant routes first: /plants/watering-summary must win over /plants/{plant_id}
api_v1_router.include_router(users_router, prefix=ROUTE_PREFIXES["users"], tags=[API_TAGS["users"]])
api_v1_router.include_router(plants_router, prefix=ROUTE_PREFIXES["plants"], tags=[API_TAGS["plants"]])
api_v1_router.include_router(plant_care_router, prefix=ROUTE_PREFIXES["plants"], tags=[API_TAGS["plants"]])
api_v1_router.include_router(care_logs_router, prefix=ROUTE_PREFIXES["care_logs"], tags=[API_TAGS["care_logs"]])
api_v1_router.include_router(reminders_router, prefix=ROUTE_PREFIXES["reminders"], tags=[API_TAGS["reminders"]])
api_v1_router.include_router(
    recommendations_router,
    prefix=ROUTE_PREFIXES["recommendations"],
    tags=[API_TAGS["recommendations"]],
)


@api_v1_router.get(
    "/",
    summary="API v1 Information",
    description="Get API v1 version information and available endpoints",
    tags=["API Info"],
)
async def api_v1_info() -> Dict[str, Any]:
    return {
        **get_api_info(),
        "endpoints": {name: f"/api/v1{prefix}" for name, prefix in ROUTE_PREFIXES.items()},
        "documentation": {
            "openapi_schema": "/openapi.json",
            "swagger_ui": "/docs",
            "redoc": "/redoc",
        },
    }
