# 📄 File: app/api/middleware/logging.py
# 🧭 Purpose (Layman Explanation):
# This file keeps a diary of every request made to the garden planner, recording what was asked for,
# how long it took to respond and whether it went wrong.
# 🧪 Purpose (Technical Summary):
# Request logging middleware that binds a request id to the logging context, emits structured
# request/response records with timing, and returns the id in the X-Request-ID header.
# 🔗 Dependencies:
# FastAPI/starlette, app.shared.utils.logging (request context), time, uuid
# 🔄 Connected Modules / Calls From:
# app.main.py (middleware registration), all API endpoints

import logging
import time
import uuid

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from app.shared.utils.logging import log_context

logger = logging.getLogger(__name__)

# Health checks are too chatty to log
EXCLUDED_PATHS = ("/health", "/api/v1/health")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Request logging middleware for API monitoring

    Features:
    - Request id correlation (incoming X-Request-ID is reused)
    - Request/response timing
    - Slow request warnings
    """

    def __init__(self, app: ASGIApp, slow_request_threshold: float = 2.0):
        super().__init__(app)
        self.slow_request_threshold = slow_request_threshold
        self.request_id_header = "X-Request-ID"

    async def dispatch(self, request: Request, call_next) -> Response:
        """
        Process and log HTTP requests/responses

        Args:
            request: HTTP request
            call_next: Next middleware or endpoint

        Returns:
            HTTP response
        """
        if request.url.path.startswith(EXCLUDED_PATHS):
            return await call_next(request)

        request_id = request.headers.get(self.request_id_header) or str(uuid.uuid4())
        request.state.request_id = request_id

        with log_context(request_id):
            start_time = time.time()
            logger.info(
                f"Request started: {request.method} {request.url.path}",
                extra={
                    "event_type": "request_started",
                    "method": request.method,
                    "path": request.url.path,
                    "query": str(request.query_params) or None,
                },
            )

            response = await call_next(request)

            duration_ms = (time.time() - start_time) * 1000
            level = logging.WARNING if duration_ms / 1000 > self.slow_request_threshold else logging.INFO
            logger.log(
                level,
                f"Request completed: {request.method} {request.url.path} - {response.status_code} - {duration_ms:.2f}ms",
                extra={
                    "event_type": "request_completed",
                    "method": request.method,
                    "path": request.url.path,
                    "status_code": response.status_code,
                    "duration_ms": round(duration_ms, 2),
                },
            )

            response.headers[self.request_id_header] = request_id
            return response
