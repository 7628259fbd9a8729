# 📄 File: app/api/middleware/error_handling.py
# 🧭 Purpose (Layman Explanation):
# This file catches any errors that happen in our app and turns them into friendly, consistent error messages
# (status, message, code) so the garden app on the other side always knows what went wrong.
# 🧪 Purpose (Technical Summary):
# Exception handlers rendering the error envelope for application exceptions, request validation errors and
# HTTP exceptions, plus a last-resort middleware that converts anything else into a generic 500 envelope.
# 🔗 Dependencies:
# FastAPI, starlette, app.shared.core.exceptions, app.shared.core.responses, logging
# 🔄 Connected Modules / Calls From:
# app.main.py (handler and middleware registration), all API endpoints

import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from app.shared.core.exceptions import GardenAppException
from app.shared.core.responses import ErrorResponse

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "An internal server error occurred"


def create_error_response(
    status_code: int,
    message: str,
    code: str,
    errors: Optional[List[Dict[str, Any]]] = None,
) -> JSONResponse:
    """
    Create a standardized error response

    Args:
        status_code: HTTP status code
        message: Human readable summary
        code: Machine readable error code
        errors: Field level validation failures

    Returns:
        JSON error envelope
    """
    body = ErrorResponse(status=status_code, message=message, code=code, errors=errors)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json", exclude_none=True),
    )


async def garden_exception_handler(request: Request, exc: GardenAppException) -> JSONResponse:
    """Render application exceptions with their own status and code."""
    if exc.status_code >= 500:
        logger.error(
            f"Server error in {request.method} {request.url.path}: {exc.message}",
            extra={"error_code": exc.error_code, "details": exc.details},
            exc_info=exc.__cause__ is not None,
        )
    else:
        logger.info(
            f"Client error in {request.method} {request.url.path}: {exc.message}",
            extra={"error_code": exc.error_code, "details": exc.details},
        )

    return create_error_response(exc.status_code, exc.message, exc.error_code)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Request parameter/body validation failures become 400 envelopes."""
    errors = [
        {
            "field": ".".join(str(part) for part in error.get("loc", ())[1:]) or None,
            "message": error.get("msg"),
            "type": error.get("type"),
        }
        for error in exc.errors()
    ]

    logger.info(f"Request validation failed for {request.method} {request.url.path}: {len(errors)} error(s)")

    return create_error_response(
        status.HTTP_400_BAD_REQUEST,
        "Request validation failed",
        "VALIDATION_ERROR",
        errors=errors,
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = exc.detail if isinstance(exc.detail, str) else "Request failed"
    if exc.status_code >= 500:
        message = INTERNAL_ERROR_MESSAGE
    return create_error_response(exc.status_code, message, f"HTTP_{exc.status_code}")


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the envelope-rendering handlers to ``app``."""
    app.add_exception_handler(GardenAppException, garden_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """
    Last-resort error handling for the Garden Planner API

    Anything the registered exception handlers did not turn into a response
    is logged with its traceback and answered with a generic 500 envelope.
    The raw exception text never reaches the client.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        try:
            return await call_next(request)
        except Exception:
            logger.error(
                f"Unhandled error in {request.method} {request.url.path}",
                exc_info=True,
            )
            return create_error_response(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                INTERNAL_ERROR_MESSAGE,
                "INTERNAL_SERVER_ERROR",
            )
