"""Global search engine instance to avoid circular imports."""

import json
from typing import Any, Dict

from .core.engine import SearchEngine
from .config import get_settings
from .models.records import Account, Customer, Transaction

# Global search engine instance
settings = get_settings()
search_engine = SearchEngine(max_per_category=settings.max_per_category)


def load_dataset(path: str) -> Dict[str, int]:
    """
    Load a JSON dataset of accounts, transactions and customers into the engine.

    Args:
        path: JSON file with "accounts", "transactions" and "customers" lists

    Returns:
        Number of records loaded per category
    """
    with open(path, 'r', encoding='utf-8') as f:
        raw: Dict[str, Any] = json.load(f)

    search_engine.load_records(
        accounts=[Account.model_validate(item) for item in raw.get("accounts", [])],
        transactions=[Transaction.model_validate(item) for item in raw.get("transactions", [])],
        customers=[Customer.model_validate(item) for item in raw.get("customers", [])],
    )
    return search_engine.get_dataset_sizes()
