"""API endpoints for the financial search service."""

from .search import router as search_router
from .display import router as display_router
from .health import router as health_router
from .metrics import router as metrics_router

__all__ = [
    "search_router",
    "display_router",
    "health_router",
    "metrics_router",
]
