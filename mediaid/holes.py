#!/usr/bin/env python3
"""
Hole finder: the unmatched gaps between accepted matches.
"""

from typing import List, Sequence

from .models import Hole, Match


class HoleFinder:
    """Computes the gaps left between position-sorted accepted matches."""

    def find_holes(self, text: str, matches: Sequence[Match]) -> List[Hole]:
        """
        Return the gap before the first match, between each pair of matches
        and after the last one. Zero-length gaps are included as degenerate
        holes so that holes and matches always tile the whole string.

        Args:
            text: Full input string
            matches: Accepted matches sorted by start, pairwise non-overlapping

        Returns:
            List of holes in order
        """
        holes: List[Hole] = []
        cursor = 0
        for match in matches:
            holes.append(Hole(start=cursor, end=match.start, text=text[cursor:match.start]))
            cursor = match.end
        holes.append(Hole(start=cursor, end=len(text), text=text[cursor:]))
        return holes
