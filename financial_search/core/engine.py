"""Main search engine implementation."""

import time
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence

from .fields import account_fields, customer_fields, transaction_fields
from .matcher import is_high_priority, matches
from .normalizer import QueryNormalizer
from .results import CategorizedResults, Category, SearchResult

DEFAULT_MAX_PER_CATEGORY = 5

_normalizer = QueryNormalizer()


def _rank_category(
    query: str,
    records: Optional[Iterable[Any]],
    category: Category,
    extractor: Callable[[Any], Optional[List[str]]],
    limit: int,
) -> List[SearchResult]:
    """Filter one category into prefix matches followed by substring matches."""
    if not records:
        return []

    high_priority: List[SearchResult] = []
    normal: List[SearchResult] = []

    for record in records:
        fields = extractor(record)
        if fields is None or not matches(fields, query):
            continue

        result = SearchResult(type=category, data=record)
        if is_high_priority(fields, query):
            high_priority.append(result)
        else:
            normal.append(result)

    return (high_priority + normal)[:limit]


def filter_by_query(
    query: str,
    accounts: Optional[Iterable[Any]] = None,
    transactions: Optional[Iterable[Any]] = None,
    customers: Optional[Iterable[Any]] = None,
    max_per_category: int = DEFAULT_MAX_PER_CATEGORY,
) -> CategorizedResults:
    """
    Filter and rank records of every category against a query.

    Args:
        query: Raw query text; lower-cased and trimmed once here
        accounts: Account records (None is treated as empty)
        transactions: Transaction records (None is treated as empty)
        customers: Customer records (None is treated as empty)
        max_per_category: Maximum number of results kept per category

    Returns:
        CategorizedResults with prefix matches ahead of substring matches,
        each tier in input order
    """
    normalized_query = _normalizer.normalize(query)
    if not normalized_query:
        return CategorizedResults()

    limit = max(0, max_per_category)

    return CategorizedResults(
        accounts=_rank_category(
            normalized_query, accounts, Category.ACCOUNT, account_fields, limit
        ),
        transactions=_rank_category(
            normalized_query, transactions, Category.TRANSACTION, transaction_fields, limit
        ),
        customers=_rank_category(
            normalized_query, customers, Category.CUSTOMER, customer_fields, limit
        ),
    )


class SearchEngine:
    """Search engine holding a dataset of accounts, transactions and customers."""

    def __init__(self, max_per_category: int = DEFAULT_MAX_PER_CATEGORY) -> None:
        """
        Initialize the search engine.

        Args:
            max_per_category: Default cap on results per category
        """
        self.max_per_category = max_per_category
        self.accounts: List[Any] = []
        self.transactions: List[Any] = []
        self.customers: List[Any] = []

        # Performance tracking
        self._stats = self._empty_stats()

    @staticmethod
    def _empty_stats() -> Dict[str, Any]:
        return {
            "total_queries": 0,
            "empty_queries": 0,
            "queries_with_results": 0,
            "no_matches": 0,
            "total_execution_time": 0.0,
        }

    def load_records(
        self,
        accounts: Optional[Sequence[Any]] = None,
        transactions: Optional[Sequence[Any]] = None,
        customers: Optional[Sequence[Any]] = None,
    ) -> None:
        """
        Replace the held collections; categories passed as None are kept.

        Args:
            accounts: Account records
            transactions: Transaction records
            customers: Customer records
        """
        if accounts is not None:
            self.accounts = list(accounts)
        if transactions is not None:
            self.transactions = list(transactions)
        if customers is not None:
            self.customers = list(customers)

    def search(
        self,
        query: str,
        max_per_category: Optional[int] = None
    ) -> CategorizedResults:
        """
        Search the held dataset.

        Args:
            query: Raw query text
            max_per_category: Custom cap (uses the engine default if None)

        Returns:
            CategorizedResults for the query
        """
        start_time = time.time()

        if max_per_category is None:
            max_per_category = self.max_per_category

        results = filter_by_query(
            query,
            self.accounts,
            self.transactions,
            self.customers,
            max_per_category,
        )

        execution_time = (time.time() - start_time) * 1000

        # Update statistics
        self._stats["total_queries"] += 1
        self._stats["total_execution_time"] += execution_time
        if not _normalizer.normalize(query):
            self._stats["empty_queries"] += 1
        elif results.total:
            self._stats["queries_with_results"] += 1
        else:
            self._stats["no_matches"] += 1

        return results

    def get_stats(self) -> Dict[str, Any]:
        """Get engine statistics."""
        stats = self._stats.copy()

        # Calculate averages
        if stats["total_queries"] > 0:
            stats["average_execution_time_ms"] = (
                stats["total_execution_time"] / stats["total_queries"]
            )
            stats["no_match_rate"] = stats["no_matches"] / stats["total_queries"]
        else:
            stats["average_execution_time_ms"] = 0.0
            stats["no_match_rate"] = 0.0

        stats["dataset"] = self.get_dataset_sizes()

        return stats

    def get_dataset_sizes(self) -> Dict[str, int]:
        """Get the number of held records per category."""
        return {
            "accounts": len(self.accounts),
            "transactions": len(self.transactions),
            "customers": len(self.customers),
        }

    def clear(self) -> None:
        """Clear all data and reset statistics."""
        self.accounts = []
        self.transactions = []
        self.customers = []
        self._stats = self._empty_stats()
