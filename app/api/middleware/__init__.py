# 📄 File: app/api/middleware/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the helpers that look at every request on its way in and out: one keeps a
# log of requests, the other turns crashes into tidy error messages.
# 🧪 Purpose (Technical Summary):
# Package initialization for API middleware and exception handlers.
# 🔗 Dependencies:
# FastAPI / starlette middleware, app.shared.core
# 🔄 Connected Modules / Calls From:
# app.main (middleware and exception handler registration)

"""
Plant Tracker API Middleware Package

Middleware Stack Order (outermost first):
    1. CORSMiddleware (FastAPI built-in)
    2. ErrorHandlingMiddleware (catches unhandled errors)
    3. RequestLoggingMiddleware (request id, request/response logging)
    4. Application Routes (innermost)

Authentication is a route dependency (``get_current_user``), not a middleware.
Rate limiting is applied per route with slowapi decorators.
"""

from .error_handling import (
    ErrorHandlingMiddleware,
    create_error_response,
    http_exception_handler,
    plantcare_exception_handler,
    rate_limit_exceeded_handler,
    validation_exception_handler,
)
from .logging import RequestLoggingMiddleware, get_request_id

__all__ = [
    "ErrorHandlingMiddleware",
    "RequestLoggingMiddleware",
    "create_error_response",
    "get_request_id",
    "http_exception_handler",
    "plantcare_exception_handler",
    "rate_limit_exceeded_handler",
    "validation_exception_handler",
]
