"""Health check and monitoring API endpoints."""

import time
from datetime import datetime

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse

from ..core.engine import filter_by_query
from ..core.formatters import format_currency, format_date
from ..models.response import HealthResponse
from ..config import get_settings

router = APIRouter(prefix="/api/v1", tags=["health"])
settings = get_settings()

# Import the global search engine instance
from ..engine_instance import search_engine

# Track application start time
app_start_time = time.time()

_PROBE_ACCOUNT = {
    "id": "probe",
    "accountNumber": "PROBE001",
    "accountHolder": "Health Probe",
    "balance": 0,
    "type": "checking",
}


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check the health status of the search service"
)
async def health_check() -> HealthResponse:
    """
    Perform a health check on the search service.

    Runs the filter and formatters against a fixed probe record so the
    check does not touch the loaded dataset or its statistics.
    """
    try:
        uptime = time.time() - app_start_time

        dependencies = {
            "search_engine": "healthy",
            "formatters": "healthy",
            "dataset": "healthy"
        }

        try:
            probe = filter_by_query("health", [_PROBE_ACCOUNT], [], [])
            if len(probe.accounts) != 1:
                dependencies["search_engine"] = "degraded"
        except Exception:
            dependencies["search_engine"] = "unhealthy"

        try:
            if format_currency(1) != "$1.00" or format_date("2024-01-15") != "Jan 15, 2024":
                dependencies["formatters"] = "degraded"
        except Exception:
            dependencies["formatters"] = "unhealthy"

        if not any(search_engine.get_dataset_sizes().values()):
            dependencies["dataset"] = "degraded"

        # Determine overall status
        if all(status == "healthy" for status in dependencies.values()):
            status = "healthy"
        elif any(status == "unhealthy" for status in dependencies.values()):
            status = "unhealthy"
        else:
            status = "degraded"

        return HealthResponse(
            status=status,
            version=settings.app_version,
            uptime=uptime,
            dependencies=dependencies
        )

    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Health check failed: {str(e)}"
        )


@router.get(
    "/health/ready",
    summary="Readiness check",
    description="Check if the service is ready to accept requests"
)
async def readiness_check() -> JSONResponse:
    """
    Check if the service is ready to accept requests.

    The service is ready once a dataset has been loaded.
    """
    dataset = search_engine.get_dataset_sizes()

    if not any(dataset.values()):
        return JSONResponse(
            status_code=503,
            content={
                "status": "not_ready",
                "error": "No records loaded",
                "timestamp": datetime.utcnow().isoformat()
            }
        )

    return JSONResponse(
        status_code=200,
        content={
            "status": "ready",
            "timestamp": datetime.utcnow().isoformat(),
            "dataset": dataset
        }
    )


@router.get(
    "/health/live",
    summary="Liveness check",
    description="Check if the service is alive and responding"
)
async def liveness_check() -> JSONResponse:
    return JSONResponse(
        status_code=200,
        content={
            "status": "alive",
            "timestamp": datetime.utcnow().isoformat(),
            "uptime": time.time() - app_start_time
        }
    )


@router.get(
    "/status",
    summary="Service status",
    description="Get detailed status information about the service"
)
async def service_status() -> JSONResponse:
    """
    Get detailed status information about the service.

    Includes configuration, engine statistics and uptime.
    """
    try:
        stats = search_engine.get_stats()

        config_info = {
            "max_per_category": settings.max_per_category,
            "max_query_length": settings.max_query_length,
            "debounce_delay_ms": settings.debounce_delay_ms,
            "debug": settings.debug
        }

        return JSONResponse(
            status_code=200,
            content={
                "service": {
                    "name": settings.app_name,
                    "version": settings.app_version,
                    "status": "running",
                    "uptime": time.time() - app_start_time,
                    "start_time": datetime.fromtimestamp(app_start_time).isoformat()
                },
                "configuration": config_info,
                "statistics": stats,
                "timestamp": datetime.utcnow().isoformat()
            }
        )

    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to get service status: {str(e)}"
        )
