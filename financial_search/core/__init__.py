"""Core search engine functionality."""

from .engine import SearchEngine, filter_by_query
from .fields import extract_fields
from .formatters import format_currency, format_date
from .highlighter import HighlightSegment, highlight
from .matcher import is_high_priority, matches
from .normalizer import QueryNormalizer
from .results import CategorizedResults, Category, SearchResult
from .session import SearchSession

__all__ = [
    "SearchEngine",
    "filter_by_query",
    "extract_fields",
    "format_currency",
    "format_date",
    "HighlightSegment",
    "highlight",
    "is_high_priority",
    "matches",
    "QueryNormalizer",
    "CategorizedResults",
    "Category",
    "SearchResult",
    "SearchSession",
]
