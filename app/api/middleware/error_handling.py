# 📄 File: app/api/middleware/error_handling.py
# 🧭 Purpose (Layman Explanation):
# Catches anything that goes wrong while answering a request and turns it into one
# consistent, friendly error message format.
# 🧪 Purpose (Technical Summary):
# Error envelope construction, FastAPI exception handlers (PlantCareException, request
# validation, HTTPException, slowapi rate limit) and a last-resort middleware turning
# unhandled exceptions into a 500 envelope.
# 🔗 Dependencies:
# FastAPI, starlette, slowapi, app.shared.core.exceptions, traceback
# 🔄 Connected Modules / Calls From:
# app.main (handler and middleware registration)

import logging
import traceback
from typing import Any, Dict, Optional

from fastapi import Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from app.shared.config.settings import get_settings
from app.shared.core.exceptions import PlantCareException, RateLimitError
from app.shared.utils.helpers import utcnow

from .logging import get_client_ip, get_request_id

logger = logging.getLogger(__name__)


def create_error_response(
    error_code: str,
    message: str,
    status_code: int = 500,
    details: Optional[Dict[str, Any]] = None,
    request_id: Optional[str] = None,
    headers: Optional[Dict[str, str]] = None,
) -> JSONResponse:
    """
    Create a standardized error response

    Args:
        error_code: Error code identifier
        message: Human-readable error message
        status_code: HTTP status code
        details: Additional error details
        request_id: Request correlation ID
        headers: Extra response headers

    Returns:
        JSON error response
    """
    error_response = {
        "error": {
            "code": error_code,
            "message": message,
            "details": details or {},
            "timestamp": utcnow().isoformat(),
            "request_id": request_id,
        }
    }

    response = JSONResponse(status_code=status_code, content=error_response, headers=headers)
    response.headers["X-Error-Code"] = error_code
    if request_id:
        response.headers["X-Request-ID"] = request_id
    return response


# =============================================================================
# EXCEPTION HANDLERS
# =============================================================================

async def plantcare_exception_handler(request: Request, exc: PlantCareException) -> JSONResponse:
    """Render application exceptions."""
    if exc.status_code >= 500:
        logger.error(f"Server error in {request.method} {request.url.path}: {exc.message}")
    else:
        logger.info(f"Client error in {request.method} {request.url.path}: {exc.error_code} {exc.message}")

    headers = None
    if isinstance(exc, RateLimitError) and exc.details.get("retry_after"):
        headers = {"Retry-After": str(exc.details["retry_after"])}

    return create_error_response(
        error_code=exc.error_code,
        message=exc.message,
        status_code=exc.status_code,
        details=exc.details,
        request_id=get_request_id(request),
        headers=headers,
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render request validation failures as 422."""
    validation_errors = [
        {
            "field": ".".join(str(loc) for loc in error.get("loc", [])),
            "message": error.get("msg", "Validation error"),
            "type": error.get("type", "validation_error"),
        }
        for error in exc.errors()
    ]
    return create_error_response(
        error_code="VALIDATION_ERROR",
        message="Request validation failed",
        status_code=422,
        details={"validation_errors": validation_errors},
        request_id=get_request_id(request),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render framework HTTP errors (unknown route, wrong method)."""
    return create_error_response(
        error_code=f"HTTP_{exc.status_code}",
        message=str(exc.detail),
        status_code=exc.status_code,
        request_id=get_request_id(request),
        headers=getattr(exc, "headers", None),
    )


async def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """Render a slowapi limit breach."""
    logger.warning(f"Rate limit exceeded for {get_client_ip(request)} on {request.url.path}: {exc.detail}")
    error = RateLimitError(
        f"Rate limit exceeded: {exc.detail}",
        limit=str(exc.detail),
        retry_after=exc.limit.limit.get_expiry(),
    )
    return await plantcare_exception_handler(request, error)


# =============================================================================
# MIDDLEWARE
# =============================================================================

class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """
    Last-resort error handler.

    Application exceptions are rendered by the exception handlers above; this
    middleware only sees exceptions nothing else handled and answers them
    with a 500 envelope.
    """

    def __init__(self, app: ASGIApp):
        super().__init__(app)
        self.settings = get_settings()

    async def dispatch(self, request: Request, call_next) -> Response:
        try:
            return await call_next(request)
        except PlantCareException as exc:
            return await plantcare_exception_handler(request, exc)
        except Exception as exc:
            logger.error(
                f"Unhandled error in {request.method} {request.url.path}: {type(exc).__name__}",
                exc_info=True,
            )

            details: Dict[str, Any] = {}
            if self.settings.DEBUG and not self.settings.is_production:
                details["debug"] = {
                    "exception_type": type(exc).__name__,
                    "exception_message": str(exc),
                    "traceback": traceback.format_exc().split("\n"),
                }

            return create_error_response(
                error_code="INTERNAL_SERVER_ERROR",
                message="An internal server error occurred",
                status_code=500,
                details=details,
                request_id=get_request_id(request),
            )
