"""Headless interactive search session: debounced input, open state and keyboard selection."""

import threading
from typing import Any, Callable, Iterable, List, Optional

import structlog

from .debounce import Debouncer
from .engine import DEFAULT_MAX_PER_CATEGORY, filter_by_query
from .results import CategorizedResults, SearchResult

logger = structlog.get_logger(__name__)

DEFAULT_DEBOUNCE_DELAY = 0.15
DEFAULT_BLUR_DELAY = 0.2


class SearchSession:
    """
    Drives a search box over three record collections.

    The session owns the caller-side state a search widget keeps between
    keystrokes: the raw query, the latest results, whether the result panel
    is open and which flattened result is highlighted. Rendering is left to
    the caller.

    Debounced searches and the delayed close run on timer threads, so all
    state changes go through one reentrant lock.
    """

    def __init__(
        self,
        accounts: Optional[Iterable[Any]] = None,
        transactions: Optional[Iterable[Any]] = None,
        customers: Optional[Iterable[Any]] = None,
        on_select: Optional[Callable[[SearchResult], None]] = None,
        debounce_delay: float = DEFAULT_DEBOUNCE_DELAY,
        blur_delay: float = DEFAULT_BLUR_DELAY,
        max_per_category: int = DEFAULT_MAX_PER_CATEGORY,
    ) -> None:
        self.accounts: List[Any] = list(accounts or [])
        self.transactions: List[Any] = list(transactions or [])
        self.customers: List[Any] = list(customers or [])
        self.on_select = on_select
        self.max_per_category = max_per_category

        self.query = ""
        self.results = CategorizedResults()
        self.is_open = False
        self.selected_index = -1

        self._lock = threading.RLock()
        self.input_debouncer = Debouncer(debounce_delay)
        self.blur_debouncer = Debouncer(blur_delay)

    @classmethod
    def from_settings(cls, settings: Any, **kwargs: Any) -> "SearchSession":
        """Build a session using the configured delays and result cap."""
        kwargs.setdefault("debounce_delay", settings.debounce_delay_ms / 1000)
        kwargs.setdefault("blur_delay", settings.blur_delay_ms / 1000)
        kwargs.setdefault("max_per_category", settings.max_per_category)
        return cls(**kwargs)

    def set_records(
        self,
        accounts: Optional[Iterable[Any]] = None,
        transactions: Optional[Iterable[Any]] = None,
        customers: Optional[Iterable[Any]] = None,
    ) -> None:
        """Replace the searched collections; categories passed as None are kept."""
        with self._lock:
            if accounts is not None:
                self.accounts = list(accounts)
            if transactions is not None:
                self.transactions = list(transactions)
            if customers is not None:
                self.customers = list(customers)

    def set_query(self, text: str) -> None:
        """Record a keystroke and schedule a search once typing settles."""
        with self._lock:
            self.query = text
        self.input_debouncer.call(self.perform_search)

    def perform_search(self) -> CategorizedResults:
        """
        Run the search for the current query immediately.

        Results for a query that changed while the search ran are dropped
        and the current results are returned instead.
        """
        with self._lock:
            query = self.query
            accounts, transactions, customers = self.accounts, self.transactions, self.customers
            limit = self.max_per_category

        results = filter_by_query(query, accounts, transactions, customers, limit)

        with self._lock:
            if self.query != query:
                logger.debug("Discarding stale search results", query=query, current_query=self.query)
                return self.results

            self.results = results
            self.is_open = len(query) > 0
            self.selected_index = -1

        logger.debug("Search performed", query=query, total_results=results.total)
        return results

    def focus(self) -> None:
        self.blur_debouncer.cancel()
        with self._lock:
            if self.query:
                self.is_open = True

    def blur(self) -> None:
        """Close the panel after a short delay so a pending click can land first."""
        self.blur_debouncer.call(self._close)

    def clear(self) -> None:
        self.input_debouncer.cancel()
        with self._lock:
            self.query = ""
            self.results = CategorizedResults()
            self._close()

    def key_down(self, key: str) -> bool:
        """
        Handle a navigation key.

        Args:
            key: Key name ("ArrowDown", "ArrowUp", "Enter" or "Escape")

        Returns:
            True if the key was consumed by the session
        """
        with self._lock:
            if not self.is_open and key == "ArrowDown":
                self.is_open = True
                self.selected_index = 0
                return True

            if not self.is_open:
                return False

            total = self.results.total

            if key == "ArrowDown":
                self.selected_index = min(self.selected_index + 1, total - 1)
            elif key == "ArrowUp":
                self.selected_index = max(self.selected_index - 1, -1)
            elif key == "Enter":
                result = self.selected_result
                if result is not None:
                    self.select(result)
            elif key == "Escape":
                self._close()
            else:
                return False

            return True

    def hover(self, index: int) -> None:
        with self._lock:
            self.selected_index = index

    def select(self, result: SearchResult) -> None:
        """Report a chosen result to the selection callback and close the panel."""
        if self.on_select is not None:
            self.on_select(result)
        self._close()

    @property
    def selected_result(self) -> Optional[SearchResult]:
        with self._lock:
            return self.results.result_at(self.selected_index)

    @property
    def status_message(self) -> str:
        """Announcement text for the current results."""
        with self._lock:
            total = self.results.total
            if total > 0:
                return f"{total} result{'' if total == 1 else 's'} found"
            if self.query:
                return "No results found"
            return ""

    def _close(self) -> None:
        with self._lock:
            self.is_open = False
            self.selected_index = -1
