"""Substring and prefix matching of queries against record fields."""

from typing import Sequence

from .normalizer import QueryNormalizer

_normalizer = QueryNormalizer()


def matches(fields: Sequence[str], query: str) -> bool:
    """
    Check whether a query occurs anywhere in a record's fields.

    Fields are joined with a single space before searching, so a query may
    match across the boundary between two adjacent fields.

    Args:
        fields: Searchable fields of one record
        query: Search query

    Returns:
        True if the joined, lower-cased fields contain the lower-cased query
    """
    searchable = _normalizer.fold_case(" ".join(fields))
    return _normalizer.fold_case(query) in searchable


def is_high_priority(fields: Sequence[str], query: str) -> bool:
    """
    Check whether a query is a prefix of a field or of one of its words.

    Args:
        fields: Searchable fields of one record
        query: Search query

    Returns:
        True for a prefix match on any single field or word
    """
    lower_query = _normalizer.fold_case(query)

    for field in fields:
        lower_field = _normalizer.fold_case(field)
        if lower_field.startswith(lower_query):
            return True

        for word in _normalizer.words(lower_field):
            if word.startswith(lower_query):
                return True

    return False
