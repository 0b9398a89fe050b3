"""Result containers produced by a filter pass."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional


class Category(str, Enum):
    """The three searchable record categories."""

    ACCOUNT = "account"
    TRANSACTION = "transaction"
    CUSTOMER = "customer"


@dataclass(frozen=True)
class SearchResult:
    """A matched record tagged with its category."""

    type: Category
    data: Any


@dataclass(frozen=True)
class CategorizedResults:
    """Bounded, ordered results for each category of one filter pass."""

    accounts: List[SearchResult] = field(default_factory=list)
    transactions: List[SearchResult] = field(default_factory=list)
    customers: List[SearchResult] = field(default_factory=list)

    @property
    def total(self) -> int:
        """Total number of results across all categories."""
        return len(self.accounts) + len(self.transactions) + len(self.customers)

    def flatten(self) -> List[SearchResult]:
        """Return all results in navigation order: accounts, transactions, customers."""
        return [*self.accounts, *self.transactions, *self.customers]

    def index_of(self, result: SearchResult) -> int:
        """
        Locate a result in the flattened navigation order.

        Args:
            result: A result returned by this pass

        Returns:
            Zero-based position, or -1 if the result is not part of this pass
        """
        for index, candidate in enumerate(self.flatten()):
            if candidate == result:
                return index
        return -1

    def result_at(self, index: int) -> Optional[SearchResult]:
        """Return the result at a flattened position, or None when out of range."""
        if index < 0:
            return None

        flattened = self.flatten()
        if index >= len(flattened):
            return None
        return flattened[index]

    def for_category(self, category: Category) -> List[SearchResult]:
        """Return the result list of one category."""
        if category is Category.ACCOUNT:
            return self.accounts
        if category is Category.TRANSACTION:
            return self.transactions
        return self.customers
