"""Metrics and monitoring API endpoints."""

import psutil

from fastapi import APIRouter, HTTPException

from ..models.response import MetricsResponse

router = APIRouter(prefix="/api/v1", tags=["metrics"])

# Import the global search engine instance
from ..engine_instance import search_engine


@router.get(
    "/metrics",
    response_model=MetricsResponse,
    summary="Get performance metrics",
    description="Get query statistics and process resource usage for the search service"
)
async def get_metrics() -> MetricsResponse:
    """
    Get performance metrics for the search service.

    Query statistics come from the engine; memory is the resident set size
    of this process.
    """
    try:
        stats = search_engine.get_stats()

        memory_info = psutil.Process().memory_info()
        memory_usage_mb = memory_info.rss / (1024 * 1024)  # Convert to MB

        return MetricsResponse(
            total_queries=stats.get("total_queries", 0),
            average_response_time_ms=stats.get("average_execution_time_ms", 0.0),
            no_match_rate=stats.get("no_match_rate", 0.0),
            memory_usage_mb=memory_usage_mb,
            dataset=stats.get("dataset", {})
        )

    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to get metrics: {str(e)}"
        )
