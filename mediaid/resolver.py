#!/usr/bin/env python3
"""
Conflict resolver for overlapping scanner candidates.

Rules:
- Higher category priority wins, regardless of length.
- Within a priority, the longer span wins, then the earlier one.
- Remaining ties: higher confidence, then category name, so the order is total.
- Accepted matches never overlap; the result is sorted by start.

Post-resolution rules only remove accepted matches:
- a year after a season/episode marker belongs to the episode title
- a leading year followed by another year belongs to the title
- a trailing "-Word" that only completes a hyphenated title ("Spider-Man")
  is not a release group when nothing was recognised before it
"""

import logging
from typing import Iterable, List, Optional, Tuple

from .models import Match, MatchCategory
from .tokenizer import Tokenizer

logger = logging.getLogger(__name__)

_STRUCTURAL_EPISODE = (MatchCategory.SEASON, MatchCategory.EPISODE)


def _sort_key(match: Match) -> Tuple[int, int, int, int, str]:
    return (-match.category.priority, -match.length, match.start, -match.confidence, match.category.name)


class ConflictResolver:
    """Greedy priority-ordered selection of non-overlapping matches."""

    def __init__(self, tokenizer: Optional[Tokenizer] = None):
        self.tokenizer = tokenizer or Tokenizer()

    def resolve(self, candidates: Iterable[Match]) -> List[Match]:
        """
        Pick the winning subset of candidate matches.

        Args:
            candidates: Matches from every scanner, in any order

        Returns:
            Pairwise non-overlapping matches sorted by start
        """
        accepted: List[Match] = []
        for candidate in sorted(candidates, key=_sort_key):
            if candidate.is_empty:
                continue
            if any(candidate.overlaps(m) for m in accepted):
                continue
            accepted.append(candidate)

        accepted.sort(key=lambda m: (m.start, m.end))
        return accepted

    def apply_rules(self, matches: List[Match], name_start: int, text: str = '') -> List[Match]:
        """
        Drop years and release groups that are really part of a title.

        Args:
            matches: Accepted matches sorted by start
            name_start: Offset where the filename (after any directory) begins
            text: The full input; without it the release group rule is skipped

        Returns:
            The matches that survive, still sorted by start
        """
        dropped = set()

        first_marker = next((m.start for m in matches if m.category in _STRUCTURAL_EPISODE), None)
        if first_marker is not None:
            for m in matches:
                if m.category is MatchCategory.YEAR and m.start > first_marker:
                    dropped.add(m)

        years = [m for m in matches if m.category is MatchCategory.YEAR and m not in dropped]
        if len(years) >= 2 and years[0].start == name_start:
            dropped.add(years[0])

        if text:
            dropped.update(self._title_hyphen_groups(matches, name_start, text))

        if dropped:
            logger.debug("post rules dropped %s", ", ".join(str(m) for m in sorted(dropped, key=lambda m: m.start)))
        return [m for m in matches if m not in dropped]

    def _title_hyphen_groups(self, matches: List[Match], name_start: int, text: str) -> List[Match]:
        groups = [m for m in matches if m.category is MatchCategory.RELEASE_GROUP and m.value.startswith('-')]
        if not groups:
            return []
        group = groups[-1]
        if any(m.start < group.start for m in matches if m is not group):
            return []

        left = self.tokenizer.tokenize(text[name_start:group.start])
        if left and self.tokenizer.should_merge_hyphenated(left[-1].value, group.raw):
            return [group]
        return []
