#!/usr/bin/env python3
"""
Year scanner: four-digit release years inside a configurable range.
"""

import re
from typing import List, Optional

from .constants import DEFAULT_YEAR_MAX, DEFAULT_YEAR_MIN
from .models import Match, MatchCategory
from .scanner import Scanner, bounded

_FOUR_DIGITS = re.compile(bounded(r'\d{4}'))


class YearScanner(Scanner):
    """
    Finds years in [year_min, year_max].

    A year at the very start of the scanned region is less certain: it is
    often part of a title ("2001.A.Space.Odyssey"), so it gets confidence 70.
    """

    name = 'year'
    category = MatchCategory.YEAR

    def __init__(self, year_min: int = DEFAULT_YEAR_MIN, year_max: int = DEFAULT_YEAR_MAX):
        self.year_min = year_min
        self.year_max = year_max

    def find_matches(self, text: str, start: int = 0, end: Optional[int] = None) -> List[Match]:
        start, end = self._region(text, start, end)
        matches = []
        for m in _FOUR_DIGITS.finditer(text, start, end):
            year = int(m.group(0))
            if not self.year_min <= year <= self.year_max:
                continue
            matches.append(Match(
                start=m.start(),
                end=m.end(),
                value=m.group(0),
                raw=str(year),
                category=self.category,
                confidence=70 if m.start() == start else 100,
            ))
        return matches
