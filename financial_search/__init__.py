"""
Financial Search - In-memory ranked search over accounts, transactions and customers.

This package filters three record collections against a free-text query,
ranking prefix matches ahead of substring matches and capping each category,
and provides the currency, date and highlight helpers used to display results.
"""

__version__ = "1.0.0"

from .core.engine import SearchEngine, filter_by_query
from .core.formatters import format_currency, format_date
from .core.highlighter import HighlightSegment, highlight
from .core.results import CategorizedResults, Category, SearchResult

__all__ = [
    "SearchEngine",
    "filter_by_query",
    "format_currency",
    "format_date",
    "HighlightSegment",
    "highlight",
    "CategorizedResults",
    "Category",
    "SearchResult",
]
