"""Response models for API endpoints."""

from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field

from ..core.results import CategorizedResults, Category, SearchResult
from .records import Account, Customer, Transaction


class SearchResultItem(BaseModel):
    """Individual search result."""

    type: Category = Field(..., description="Record category")
    index: int = Field(..., ge=0, description="Position in accounts, transactions, customers order")
    data: Union[Account, Transaction, Customer] = Field(..., description="The matched record")

    @classmethod
    def from_result(cls, result: SearchResult, index: int) -> "SearchResultItem":
        return cls(type=result.type, index=index, data=result.data)


class SearchResponse(BaseModel):
    """Response for search queries."""

    query: str = Field(..., description="Original search query")
    execution_time_ms: float = Field(..., description="Query execution time in milliseconds")
    total_results: int = Field(..., description="Total number of results across categories")
    accounts: List[SearchResultItem] = Field(..., description="Account results")
    transactions: List[SearchResultItem] = Field(..., description="Transaction results")
    customers: List[SearchResultItem] = Field(..., description="Customer results")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Response timestamp")

    @classmethod
    def from_results(
        cls,
        query: str,
        results: CategorizedResults,
        execution_time_ms: float
    ) -> "SearchResponse":
        """Build a response, numbering results in navigation order."""
        items = [
            SearchResultItem.from_result(result, index)
            for index, result in enumerate(results.flatten())
        ]
        return cls(
            query=query,
            execution_time_ms=execution_time_ms,
            total_results=results.total,
            accounts=[item for item in items if item.type is Category.ACCOUNT],
            transactions=[item for item in items if item.type is Category.TRANSACTION],
            customers=[item for item in items if item.type is Category.CUSTOMER],
        )


class HighlightSegmentModel(BaseModel):
    """A segment of highlighted text."""

    is_match: bool = Field(..., description="Whether the segment matched the query")
    text: str = Field(..., description="Segment text in original casing")


class HighlightResponse(BaseModel):
    """Response for highlight requests."""

    text: str = Field(..., description="Original display text")
    query: str = Field(..., description="Highlighted query")
    segments: List[HighlightSegmentModel] = Field(..., description="Alternating segments")
    match_count: int = Field(..., description="Number of matching segments")


class FormatResponse(BaseModel):
    """Response for formatting requests."""

    value: str = Field(..., description="Input value as received")
    formatted: str = Field(..., description="Display string")


class RecordsResponse(BaseModel):
    """Sizes of the loaded dataset."""

    accounts: int = Field(..., description="Loaded accounts")
    transactions: int = Field(..., description="Loaded transactions")
    customers: int = Field(..., description="Loaded customers")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Response timestamp")


class ErrorResponse(BaseModel):
    """Error response model."""

    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Error message")
    details: Optional[Dict[str, Any]] = Field(None, description="Additional error details")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Error timestamp")
    request_id: Optional[str] = Field(None, description="Request identifier for tracking")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Application version")
    uptime: float = Field(..., description="Service uptime in seconds")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Check timestamp")
    dependencies: Dict[str, str] = Field(..., description="Dependency status")


class MetricsResponse(BaseModel):
    """Performance metrics response."""

    total_queries: int = Field(..., description="Total queries processed")
    average_response_time_ms: float = Field(..., description="Average response time")
    no_match_rate: float = Field(..., description="Share of queries without results")
    memory_usage_mb: float = Field(..., description="Process memory usage in MB")
    dataset: Dict[str, int] = Field(..., description="Loaded records per category")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Metrics timestamp")
