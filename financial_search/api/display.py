"""Display helper endpoints: highlighting and formatting."""

from fastapi import APIRouter, Query

from ..core.formatters import format_currency, format_date
from ..core.highlighter import highlight
from ..models.request import HighlightRequest
from ..models.response import FormatResponse, HighlightResponse, HighlightSegmentModel

router = APIRouter(prefix="/api/v1", tags=["display"])


@router.post(
    "/highlight",
    response_model=HighlightResponse,
    summary="Highlight query matches",
    description="Split display text into segments that do and do not match a query"
)
async def highlight_text(request: HighlightRequest) -> HighlightResponse:
    segments = highlight(request.text, request.query)

    return HighlightResponse(
        text=request.text,
        query=request.query,
        segments=[
            HighlightSegmentModel(is_match=segment.is_match, text=segment.text)
            for segment in segments
        ],
        match_count=sum(1 for segment in segments if segment.is_match)
    )


@router.get(
    "/format/currency",
    response_model=FormatResponse,
    summary="Format a currency amount",
    description="Format an amount as US dollars; invalid amounts render as $0.00"
)
async def format_currency_value(
    amount: str = Query(..., description="Amount to format")
) -> FormatResponse:
    """
    Format an amount received as text.

    Text that is not a number is passed through so the formatter's
    fallback applies.
    """
    try:
        number = float(amount)
    except ValueError:
        formatted = format_currency(amount)
    else:
        formatted = format_currency(number)

    return FormatResponse(value=amount, formatted=formatted)


@router.get(
    "/format/date",
    response_model=FormatResponse,
    summary="Format a date",
    description="Format an ISO-8601 date; unparseable input is returned unchanged"
)
async def format_date_value(
    value: str = Query(..., description="ISO-8601 date or date-time")
) -> FormatResponse:
    return FormatResponse(value=value, formatted=format_date(value))
