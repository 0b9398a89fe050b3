"""Text normalization utilities for consistent query processing."""

import re
from typing import List


class QueryNormalizer:
    """Handles query normalization and word splitting for matching."""

    def __init__(self) -> None:
        """Initialize the normalizer."""
        # Compile regex patterns for performance
        self.whitespace_regex = re.compile(r'\s+')

    def normalize(self, text: str) -> str:
        """
        Normalize a raw query for a filter pass.

        Args:
            text: Raw query text

        Returns:
            Lower-cased text with surrounding whitespace removed
        """
        if not text:
            return ""

        return text.lower().strip()

    def fold_case(self, text: str) -> str:
        """Lower-case text without trimming it."""
        return text.lower() if text else ""

    def words(self, text: str) -> List[str]:
        """
        Split text into whitespace-delimited words.

        Args:
            text: Input text

        Returns:
            List of non-empty words, in order
        """
        if not text:
            return []

        return [word for word in self.whitespace_regex.split(text) if word]
