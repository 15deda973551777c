# 📄 File: app/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes version 1 of the plant tracker API so later versions can be added without
# breaking existing apps.
# 🧪 Purpose (Technical Summary):
# Package initialization for API version 1: metadata and the route prefix table used
# by the router aggregation.
# 🔗 Dependencies:
# None
# 🔄 Connected Modules / Calls From:
# app.api.v1.router, app.main

"""
Plant Tracker API Version 1

Structure:
    v1/
    ├── __init__.py          # This file
    ├── router.py            # Module router aggregation
    └── health.py            # Health check endpoints
"""

from typing import Any, Dict

__version__ = "1.0.0"
__api_version__ = "v1"

# Route prefixes, relative to /api/v1
ROUTE_PREFIXES = {
    "users": "/users",
    "plants": "/plants",
    "care_logs": "/care-logs",
    "reminders": "/reminders",
    "recommendations": "/ai-recommendations",
}

API_TAGS = {
    "users": "Users",
    "plants": "Plants",
    "care_logs": "Care Logs",
    "reminders": "Reminders",
    "recommendations": "AI Recommendations",
}


def get_api_info() -> Dict[str, Any]:
    return {
        "version": __version__,
        "api_version": __api_version__,
        "modules": list(ROUTE_PREFIXES),
    }
