#!/usr/bin/env python3
"""
Scanner base classes.

A scanner looks at a [start, end) region of the full input string and returns
candidate matches with offsets in the coordinates of the full string.
Scanners hold only compiled patterns and never keep state between calls, so
one instance can be shared by any number of threads.
"""

import re
from abc import ABC, abstractmethod
from typing import List, Optional, Pattern, Sequence, Tuple

from .models import Match, MatchCategory

# Alphanumeric guards; "_" and "." count as separators here, unlike \b
WORD_START = r'(?<![A-Za-z0-9])'
WORD_END = r'(?![A-Za-z0-9])'


def bounded(source: str) -> str:
    """Wrap a regex source so it only matches a whole word-ish segment."""
    return f'{WORD_START}(?:{source}){WORD_END}'


class Scanner(ABC):
    """Finds candidate matches of one category."""

    name: str = 'scanner'
    category: MatchCategory = MatchCategory.OTHER

    @property
    def categories(self) -> Tuple[MatchCategory, ...]:
        """Categories this scanner can emit."""
        return (self.category,)

    @abstractmethod
    def find_matches(self, text: str, start: int = 0, end: Optional[int] = None) -> List[Match]:
        """
        Find candidate matches in text[start:end].

        Args:
            text: Full input string
            start: First offset to look at
            end: Offset to stop at (exclusive), defaults to len(text)

        Returns:
            Candidate matches, offsets into text
        """

    @staticmethod
    def _region(text: str, start: int, end: Optional[int]) -> Tuple[int, int]:
        end = len(text) if end is None else min(end, len(text))
        start = max(0, min(start, end))
        return start, end

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name})"


class MarkerScanner(Scanner):
    """
    Table-driven scanner for fixed vocabularies.

    Each marker is a (normalized value, regex source) pair. Every hit becomes a
    Match whose value is the matched text and whose raw is the normalized value.
    Overlapping hits are all returned; the conflict resolver keeps the longest.
    """

    def __init__(self, name: str, category: MatchCategory,
                 markers: Sequence[Tuple[str, str]], confidence: int = 100):
        self.name = name
        self.category = category
        self.confidence = confidence
        self._patterns: List[Tuple[str, Pattern]] = [
            (normalized, re.compile(bounded(source), re.IGNORECASE))
            for normalized, source in markers
        ]

    def find_matches(self, text: str, start: int = 0, end: Optional[int] = None) -> List[Match]:
        start, end = self._region(text, start, end)
        found = {}
        for normalized, pattern in self._patterns:
            for m in pattern.finditer(text, start, end):
                # First marker in table order wins a shared span
                found.setdefault((m.start(), m.end()), Match(
                    start=m.start(),
                    end=m.end(),
                    value=m.group(0),
                    raw=normalized,
                    category=self.category,
                    confidence=self.confidence,
                ))
        return sorted(found.values(), key=lambda m: (m.start, m.end))
