"""Split display text into query-matching and non-matching segments."""

import re
from typing import List, NamedTuple


class HighlightSegment(NamedTuple):
    """A run of display text and whether it matched the query."""

    is_match: bool
    text: str


def highlight(text: str, query: str) -> List[HighlightSegment]:
    """
    Mark the occurrences of a query within a display string.

    Segments strictly alternate non-match / match, starting with a
    (possibly empty) non-matching segment. Matching segments keep the
    original casing, and the segments concatenate back to ``text``.

    Args:
        text: Display text
        query: Query, matched literally and case-insensitively

    Returns:
        List of HighlightSegment
    """
    if not query or not query.strip():
        return [HighlightSegment(False, text)]

    pattern = re.compile(f"({re.escape(query)})", re.IGNORECASE)
    parts = pattern.split(text)

    return [
        HighlightSegment(index % 2 == 1, part)
        for index, part in enumerate(parts)
    ]
