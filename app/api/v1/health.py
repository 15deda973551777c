# 📄 File: app/api/v1/health.py
# 🧭 Purpose (Layman Explanation):
# Health check endpoints that tell us whether the plant tracker is up and whether it can
# reach its database, like a quick checkup for the service.
# 🧪 Purpose (Technical Summary):
# Liveness and detailed health endpoints reporting database connectivity, connection
# pool state and psutil system metrics.
# 🔗 Dependencies:
# FastAPI, psutil, app.shared.infrastructure.database.connection
# 🔄 Connected Modules / Calls From:
# app.main (mounted at the root), monitoring systems, load balancers

import logging
import platform
import sys
import time
from typing import Any, Dict

import psutil
from fastapi import APIRouter
from fastapi.responses import JSONResponse

from app.shared.config.settings import get_settings
from app.shared.infrastructure.database.connection import database_health_check, get_connection_info
from app.shared.utils.helpers import utcnow

logger = logging.getLogger(__name__)

SERVICE_NAME = "plant-care-tracker"

health_router = APIRouter(tags=["Health Check"])

# Application start time for uptime calculation
_app_start_time = time.monotonic()


@health_router.get(
    "/health",
    summary="Basic Health Check",
    description="Basic health check endpoint for load balancers and monitoring",
)
async def health_check() -> Dict[str, Any]:
    """
    Basic health check endpoint.

    Returns a static OK status without touching the database.
    """
    return {
        "status": "healthy",
        "timestamp": utcnow().isoformat(),
        "service": SERVICE_NAME,
        "version": get_settings().APP_VERSION,
    }


@health_router.get(
    "/health/detailed",
    summary="Detailed Health Check",
    description="Health check including database connectivity and system resources",
)
async def detailed_health_check() -> JSONResponse:
    """
    Comprehensive health check.

    Returns 200 when healthy or degraded, 503 when the database is unreachable.
    """
    start_time = time.perf_counter()
    overall_status = "healthy"
    components: Dict[str, Any] = {}

    db_health = await database_health_check()
    db_health["connection"] = get_connection_info()
    components["database"] = db_health
    if db_health["status"] != "healthy":
        overall_status = "unhealthy"

    try:
        system_metrics = _get_system_metrics()
        components["system"] = system_metrics
        if (system_metrics["cpu_percent"] > 90 or
                system_metrics["memory_percent"] > 90 or
                system_metrics["disk_percent"] > 95):
            if overall_status == "healthy":
                overall_status = "degraded"
    except (psutil.Error, OSError) as e:
        logger.warning(f"System metrics unavailable: {e}")
        components["system"] = {"status": "error", "error": str(e)}
        if overall_status == "healthy":
            overall_status = "degraded"

    settings = get_settings()
    health_response = {
        "status": overall_status,
        "timestamp": utcnow().isoformat(),
        "service": SERVICE_NAME,
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT,
        "uptime_seconds": round(time.monotonic() - _app_start_time, 2),
        "response_time_seconds": round(time.perf_counter() - start_time, 4),
        "components": components,
    }

    status_code = 503 if overall_status == "unhealthy" else 200
    return JSONResponse(status_code=status_code, content=health_response)


def _get_system_metrics() -> Dict[str, Any]:
    """Collect host resource usage with psutil."""
    memory = psutil.virtual_memory()
    disk = psutil.disk_usage("/")
    return {
        "status": "ok",
        "cpu_percent": psutil.cpu_percent(interval=None),
        "memory_percent": memory.percent,
        "memory_available_mb": round(memory.available / (1024 * 1024), 1),
        "disk_percent": disk.percent,
        "python_version": sys.version.split()[0],
        "platform": platform.platform(),
    }
