# 📄 File: app/api/middleware/logging.py
# 🧭 Purpose (Layman Explanation):
# Keeps a diary of every request made to the plant tracker: what was asked for, who asked,
# how long it took, and whether it worked. Passwords and tokens are blanked out.
# 🧪 Purpose (Technical Summary):
# Request logging middleware that assigns/propagates X-Request-ID, binds it to the
# logging context, and logs request and response with timing and header redaction.
# 🔗 Dependencies:
# FastAPI, starlette BaseHTTPMiddleware, app.shared.utils.logging, uuid, time
# 🔄 Connected Modules / Calls From:
# app.main (middleware registration), error handlers (request_id on request.state)

import logging
import time
import uuid
from typing import Any, Dict, Optional

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from app.shared.utils.helpers import mask_sensitive_data
from app.shared.utils.logging import log_context

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"

# Paths that are polled constantly and not worth a log line
EXCLUDED_PATHS = {"/health", "/favicon.ico"}

SLOW_REQUEST_MS = 1000


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Request logging middleware.

    Every response carries ``X-Request-ID`` (taken from the request when the
    client sent one) and ``X-Response-Time``.
    """

    def __init__(self, app: ASGIApp):
        super().__init__(app)

        # Sensitive headers that should not be logged
        self.sensitive_headers = {
            "authorization",
            "cookie",
            "x-api-key",
            "x-access-token",
            "x-refresh-token",
        }

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = self._get_or_create_request_id(request)
        start_time = time.perf_counter()

        with log_context(request_id=request_id):
            log_request = request.url.path not in EXCLUDED_PATHS
            if log_request:
                logger.info(
                    f"HTTP Request: {request.method} {request.url.path}",
                    extra={"extra_fields": self._request_log_data(request)},
                )

            try:
                response = await call_next(request)
            except Exception as e:
                processing_ms = self._elapsed_ms(start_time)
                logger.error(
                    f"HTTP Error: {request.method} {request.url.path} -> {type(e).__name__}: {e}",
                    extra={"extra_fields": {"processing_time_ms": processing_ms}},
                )
                raise

            processing_ms = self._elapsed_ms(start_time)
            response.headers[REQUEST_ID_HEADER] = request_id
            response.headers["X-Response-Time"] = f"{processing_ms / 1000:.3f}s"

            if log_request:
                self._log_response(request, response, processing_ms)
            return response

    def _get_or_create_request_id(self, request: Request) -> str:
        request_id = request.headers.get(REQUEST_ID_HEADER.lower()) or str(uuid.uuid4())
        request.state.request_id = request_id
        return request_id

    def _request_log_data(self, request: Request) -> Dict[str, Any]:
        return {
            "method": request.method,
            "path": request.url.path,
            "query": mask_sensitive_data(str(request.query_params)) if request.query_params else None,
            "client_ip": get_client_ip(request),
            "user_agent": request.headers.get("user-agent"),
            "headers": self._filter_sensitive_headers(dict(request.headers)),
        }

    def _filter_sensitive_headers(self, headers: Dict[str, str]) -> Dict[str, str]:
        return {
            key: "[REDACTED]" if key.lower() in self.sensitive_headers else value
            for key, value in headers.items()
        }

    def _log_response(self, request: Request, response: Response, processing_ms: float) -> None:
        if response.status_code >= 500:
            log_level = logging.ERROR
        elif response.status_code >= 400 or processing_ms > SLOW_REQUEST_MS:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        logger.log(
            log_level,
            f"HTTP Response: {request.method} {request.url.path} -> {response.status_code} ({processing_ms:.1f}ms)",
            extra={"extra_fields": {"status_code": response.status_code, "processing_time_ms": processing_ms}},
        )

    @staticmethod
    def _elapsed_ms(start_time: float) -> float:
        return round((time.perf_counter() - start_time) * 1000, 2)


def get_client_ip(request: Request) -> str:
    """Client IP, honouring proxy headers."""
    forwarded_for = request.headers.get("x-forwarded-for")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip()
    real_ip = request.headers.get("x-real-ip")
    if real_ip:
        return real_ip
    if request.client:
        return request.client.host
    return "unknown"


def get_request_id(request: Request) -> Optional[str]:
    return getattr(request.state, "request_id", None)
