# 📄 File: app/main.py
#
# 🧭 Purpose (Layman Explanation):
# The main control center that starts up the Garden Planner app, connects all the
# different parts together and makes sure everything is ready to handle requests.
#
# 🧪 Purpose (Technical Summary):
# FastAPI application factory and entry point with logging setup, middleware
# stack, exception handlers, database lifecycle and API v1 router registration.
#
# 🔗 Dependencies:
# - FastAPI framework, uvicorn
# - app.shared.config.settings
# - app.shared.infrastructure.database (connection, session)
# - app.api.middleware, app.api.v1.router
#
# 🔄 Connected Modules / Calls From:
# - uvicorn server startup
# - Docker container entry point
# - tests (create_application)

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from app.api import API_PREFIX, CURRENT_VERSION
from app.api.middleware.error_handling import ErrorHandlingMiddleware, register_exception_handlers
from app.api.middleware.logging import RequestLoggingMiddleware
from app.api.v1.router import api_v1_router
from app.shared.config.settings import get_settings
from app.shared.infrastructure.database.connection import close_database, init_database
from app.shared.infrastructure.database.session import initialize_sessions
from app.shared.utils.logging import setup_logging

# Get application settings
settings = get_settings()

setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Opens the database engine and session factory on startup and disposes of
    the engine on shutdown. External API clients are request scoped and need
    no global setup.
    """
    logger.info("🌱 Garden Planner API starting up...")

    await init_database()
    logger.info("✅ Database connection initialized")

    initialize_sessions()
    logger.info("✅ Session manager initialized")

    logger.info("✅ Garden Planner API startup complete")
    try:
        yield
    finally:
        logger.info("🔄 Garden Planner API shutting down...")
        await close_database()
        logger.info("✅ Database connections closed")


def create_application() -> FastAPI:
    """
    Application factory function.

    Creates and configures the FastAPI application with all necessary
    middleware, routers and exception handlers.

    Returns:
        FastAPI: Configured FastAPI application instance
    """
    app = FastAPI(
        title=settings.APP_NAME,
        description=settings.APP_DESCRIPTION,
        version=settings.APP_VERSION,
        docs_url="/docs" if not settings.is_production else None,
        redoc_url="/redoc" if not settings.is_production else None,
        openapi_url="/openapi.json" if not settings.is_production else None,
        lifespan=lifespan,
        debug=settings.DEBUG,
    )

    # =========================================================================
    # MIDDLEWARE CONFIGURATION
    # =========================================================================
    # Starlette runs the last added middleware first.

    app.add_middleware(GZipMiddleware, minimum_size=1000)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "X-Process-Time"],
    )

    if not settings.is_testing:
        app.add_middleware(RequestLoggingMiddleware)

    # Error handling middleware (outermost, catches everything else)
    app.add_middleware(ErrorHandlingMiddleware)

    # =========================================================================
    # EXCEPTION HANDLERS
    # =========================================================================

    register_exception_handlers(app)

    # =========================================================================
    # ROUTER REGISTRATION
    # =========================================================================

    app.include_router(api_v1_router, prefix=f"{API_PREFIX}/{CURRENT_VERSION}")

    @app.middleware("http")
    async def api_version_header(request: Request, call_next):
        response: Response = await call_next(request)
        response.headers["X-API-Version"] = CURRENT_VERSION
        return response

    # =========================================================================
    # ROOT ENDPOINTS
    # =========================================================================

    @app.get("/", include_in_schema=False)
    async def root() -> dict:
        """Root endpoint with API information."""
        return {
            "name": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "description": settings.APP_DESCRIPTION,
            "docs_url": "/docs" if not settings.is_production else None,
            "health_check": "/api/v1/health",
            "api_base": f"{API_PREFIX}/{CURRENT_VERSION}",
        }

    @app.get("/favicon.ico", include_in_schema=False)
    async def favicon():
        """Favicon endpoint to prevent 404 errors."""
        return Response(status_code=204)

    return app


# Create the FastAPI application
app = create_application()


def main():
    """
    Run the application in development.

    Used when running ``python -m app.main`` or the ``garden-planner``
    console script.
    """
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD and settings.is_development,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
