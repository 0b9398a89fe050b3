"""Data models for the financial search service."""

from .records import Account, AccountType, Customer, Transaction, TransactionType
from .response import (
    SearchResultItem,
    SearchResponse,
    HighlightResponse,
    FormatResponse,
    RecordsResponse,
    ErrorResponse,
)
from .request import SearchRequest, RecordsLoadRequest, HighlightRequest

__all__ = [
    "Account",
    "AccountType",
    "Customer",
    "Transaction",
    "TransactionType",
    "SearchResultItem",
    "SearchResponse",
    "HighlightResponse",
    "FormatResponse",
    "RecordsResponse",
    "ErrorResponse",
    "SearchRequest",
    "RecordsLoadRequest",
    "HighlightRequest",
]
