# 📄 File: app/api/middleware/__init__.py
# 🧭 Purpose (Layman Explanation):
# This file organizes the middleware components that act like helpers around every API call,
# logging what happens and turning errors into clear responses.
# 🧪 Purpose (Technical Summary):
# Package initialization for API middleware components, providing centralized imports
# for request logging and error handling.
# 🔗 Dependencies:
# FastAPI middleware components, app.shared.core
# 🔄 Connected Modules / Calls From:
# app.main.py, FastAPI application setup, middleware registration

"""
Garden Planner API Middleware Package

Middleware Stack Order (applied in reverse order of registration):
    1. ErrorHandlingMiddleware (outermost - catches all errors)
    2. RequestLoggingMiddleware (logs all requests/responses)
    3. Application Routes (innermost)

Usage:
    from app.api.middleware import (
        ErrorHandlingMiddleware,
        RequestLoggingMiddleware,
        register_exception_handlers,
    )

    register_exception_handlers(app)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(ErrorHandlingMiddleware)
"""

from .error_handling import ErrorHandlingMiddleware, register_exception_handlers
from .logging import RequestLoggingMiddleware

__all__ = [
    "ErrorHandlingMiddleware",
    "RequestLoggingMiddleware",
    "register_exception_handlers",
]
