"""Frequency dictionary of identifiers."""

from __future__ import annotations

from collections import Counter

from minilisp.scanner import Scanner, Source
from minilisp.values import Token


class FreqMap(Counter):
    """Counts occurrences of identifier texts; missing keys count 0."""

    def count_tokens(self, source: Source) -> None:
        """Add one for every identifier token in the source."""
        self.update(t.text for t in Scanner(source).tokens() if t.tok is Token.ID)

    def put(self, key: str, value: int) -> None:
        """Add value to the count of key."""
        self[key] += value