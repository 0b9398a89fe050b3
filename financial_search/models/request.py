"""Request models for API endpoints."""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from .records import Account, Customer, Transaction


class SearchRequest(BaseModel):
    """Request model for searching request-supplied collections."""

    query: str = Field(..., max_length=100, description="Search query")
    accounts: List[Account] = Field(default_factory=list, description="Accounts to search")
    transactions: List[Transaction] = Field(
        default_factory=list, description="Transactions to search"
    )
    customers: List[Customer] = Field(default_factory=list, description="Customers to search")
    max_per_category: Optional[int] = Field(
        None, ge=0, le=100, description="Maximum number of results per category"
    )


class RecordsLoadRequest(BaseModel):
    """Request model for replacing the loaded dataset."""

    accounts: Optional[List[Account]] = Field(None, description="Replacement accounts")
    transactions: Optional[List[Transaction]] = Field(
        None, description="Replacement transactions"
    )
    customers: Optional[List[Customer]] = Field(None, description="Replacement customers")


class HighlightRequest(BaseModel):
    """Request model for highlighting a query within display text."""

    text: str = Field(..., description="Display text")
    query: str = Field(..., max_length=100, description="Query to highlight")

    @field_validator('text')
    @classmethod
    def validate_text(cls, v: str) -> str:
        """Reject oversized display text."""
        if len(v) > 10000:
            raise ValueError("Text cannot exceed 10000 characters")
        return v
