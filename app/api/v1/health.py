# 📄 File: app/api/v1/health.py
# 🧭 Purpose (Layman Explanation):
# Health check endpoints that tell us whether the garden planner is up and can
# reach its database, like a quick checkup for the system.
#
# 🧪 Purpose (Technical Summary):
# Liveness, readiness and detailed health endpoints. The detailed check combines
# the database check with host resource metrics from psutil.
#
# 🔗 Dependencies:
# FastAPI, psutil, app.shared.infrastructure.database.connection
#
# 🔄 Connected Modules / Calls From:
# app.api.v1.router, monitoring systems, load balancers

import logging
from datetime import datetime, timezone
from typing import Any, Dict

import psutil
from fastapi import APIRouter, Response
from fastapi.responses import JSONResponse

from app.shared.config.settings import get_settings
from app.shared.infrastructure.database.connection import database_health_check as db_health_check

logger = logging.getLogger(__name__)

health_router = APIRouter()

SERVICE_NAME = "garden-planner-api"

# Application start time for uptime calculation
_app_start_time = datetime.now(timezone.utc)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _uptime_seconds() -> float:
    return (datetime.now(timezone.utc) - _app_start_time).total_seconds()


@health_router.get("/health",
                   summary="Basic Health Check",
                   description="Service liveness plus a database connectivity check")
async def health_check() -> JSONResponse:
    """
    Basic health check endpoint.

    Returns 200 with status "healthy" when the database answers, 503 with
    status "unhealthy" otherwise.
    """
    db_health = await db_health_check()
    healthy = db_health["status"] == "healthy"

    return JSONResponse(
        status_code=200 if healthy else 503,
        content={
            "status": "healthy" if healthy else "unhealthy",
            "timestamp": _now(),
            "service": SERVICE_NAME,
            "version": get_settings().APP_VERSION,
            "database": db_health["status"],
        }
    )


@health_router.get("/health/detailed",
                   summary="Detailed Health Check",
                   description="Database status plus host resource metrics")
async def detailed_health_check() -> JSONResponse:
    """
    Comprehensive health check.

    Checks:
    - Database connectivity
    - System resources (CPU, memory, disk)

    High resource usage marks the service "degraded" but still answers 200;
    an unreachable database answers 503.
    """
    overall_status = "healthy"
    components: Dict[str, Any] = {}

    db_health = await db_health_check()
    components["database"] = db_health
    if db_health["status"] != "healthy":
        overall_status = "unhealthy"

    system_metrics = _get_system_metrics()
    components["system"] = system_metrics
    if overall_status == "healthy" and system_metrics["status"] == "healthy" and (
        system_metrics["cpu_percent"] > 90
        or system_metrics["memory_percent"] > 90
        or system_metrics["disk_percent"] > 95
    ):
        overall_status = "degraded"

    return JSONResponse(
        status_code=503 if overall_status == "unhealthy" else 200,
        content={
            "status": overall_status,
            "timestamp": _now(),
            "service": SERVICE_NAME,
            "version": get_settings().APP_VERSION,
            "environment": get_settings().ENVIRONMENT,
            "uptime_seconds": _uptime_seconds(),
            "components": components,
        }
    )


@health_router.get("/health/live",
                   summary="Liveness Check",
                   description="Returns 200 while the process is running")
async def liveness_check() -> Response:
    return Response(status_code=200, content="OK")


@health_router.get("/health/ready",
                   summary="Readiness Check",
                   description="Returns 200 once the database is reachable")
async def readiness_check() -> JSONResponse:
    db_health = await db_health_check()

    if db_health["status"] == "healthy":
        return JSONResponse(status_code=200, content={"status": "ready", "timestamp": _now()})

    logger.warning("Readiness check failed: database unhealthy")
    return JSONResponse(
        status_code=503,
        content={"status": "not_ready", "reason": "database_unhealthy", "timestamp": _now()}
    )


def _get_system_metrics() -> Dict[str, Any]:
    """Get basic system metrics"""
    try:
        disk = psutil.disk_usage('/')
        return {
            "status": "healthy",
            # non-blocking: usage since the previous call
            "cpu_percent": psutil.cpu_percent(interval=None),
            "memory_percent": psutil.virtual_memory().percent,
            "disk_percent": (disk.used / disk.total) * 100,
            "uptime_seconds": _uptime_seconds(),
            "timestamp": _now(),
        }
    except (OSError, psutil.Error) as e:
        logger.warning(f"System metrics unavailable: {e}")
        return {
            "status": "error",
            "error": "System metrics unavailable",
            "timestamp": _now(),
        }
