"""Search API endpoints."""

import time
from typing import Optional

from fastapi import APIRouter, HTTPException, Query, Path

from ..core.engine import filter_by_query
from ..models.response import SearchResponse, RecordsResponse
from ..models.request import SearchRequest, RecordsLoadRequest
from ..config import get_settings

router = APIRouter(prefix="/api/v1", tags=["search"])
settings = get_settings()

# Import the global search engine instance
from ..engine_instance import search_engine


@router.get(
    "/search/{query}",
    response_model=SearchResponse,
    summary="Search the loaded dataset",
    description="Search loaded accounts, transactions and customers, prefix matches first"
)
async def search_loaded(
    query: str = Path(..., description="The text to search for", min_length=1),
    max_per_category: Optional[int] = Query(
        None,
        ge=0,
        le=100,
        description="Maximum number of results per category"
    )
) -> SearchResponse:
    """
    Search the dataset held by the service.

    Each category is ranked independently: records where the query starts
    a field or a word come first, then other substring matches.
    """
    if len(query) > settings.max_query_length:
        raise HTTPException(
            status_code=400,
            detail=f"Query too long. Maximum length is {settings.max_query_length} characters"
        )

    try:
        start_time = time.time()
        results = search_engine.search(query, max_per_category=max_per_category)
        execution_time = (time.time() - start_time) * 1000

        return SearchResponse.from_results(query, results, execution_time)

    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Search failed: {str(e)}"
        )


@router.post(
    "/search",
    response_model=SearchResponse,
    summary="Search with request body",
    description="Search collections supplied in the request body"
)
async def search_with_body(request: SearchRequest) -> SearchResponse:
    """
    Search request-supplied collections without touching the loaded dataset.
    """
    try:
        start_time = time.time()
        max_per_category = request.max_per_category
        if max_per_category is None:
            max_per_category = settings.max_per_category

        results = filter_by_query(
            request.query,
            request.accounts,
            request.transactions,
            request.customers,
            max_per_category,
        )
        execution_time = (time.time() - start_time) * 1000

        return SearchResponse.from_results(request.query, results, execution_time)

    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Search failed: {str(e)}"
        )


@router.get(
    "/records",
    response_model=RecordsResponse,
    summary="Get dataset sizes",
    description="Get the number of loaded records per category"
)
async def get_records() -> RecordsResponse:
    return RecordsResponse(**search_engine.get_dataset_sizes())


@router.post(
    "/records",
    response_model=RecordsResponse,
    summary="Load records",
    description="Replace the loaded accounts, transactions and/or customers"
)
async def load_records(request: RecordsLoadRequest) -> RecordsResponse:
    """
    Replace loaded collections.

    Categories omitted from the body keep their current records.
    """
    try:
        search_engine.load_records(
            accounts=request.accounts,
            transactions=request.transactions,
            customers=request.customers,
        )
        return RecordsResponse(**search_engine.get_dataset_sizes())

    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to load records: {str(e)}"
        )
