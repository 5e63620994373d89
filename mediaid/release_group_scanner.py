#!/usr/bin/env python3
"""
Release group scanner.

Three placements are recognised:
- trailing "-GROUP" at the end of the name (span includes the dash)
- scene-style prefix "group-title.year..." (lower-case group, span includes
  the dash); only tried when there is no trailing group
- leading bracketed "[Group]" as used by fansub releases
"""

import re
from typing import FrozenSet, Iterable, List, Optional

from .constants import COMMON_TITLE_WORDS, KNOWN_TAGS, RELEASE_GROUP_FALSE_POSITIVES
from .models import Match, MatchCategory
from .scanner import Scanner

_TRAILING = re.compile(r'-(?P<group>[A-Za-z0-9]+)\Z')
_PREFIX = re.compile(r'(?P<group>[a-z][a-z0-9]{1,9})-[a-zA-Z][a-zA-Z0-9]*\.[a-zA-Z0-9]')
_BRACKETED = re.compile(r'\[(?P<group>[A-Za-z0-9][A-Za-z0-9 ._&-]{0,30})\]')


class ReleaseGroupScanner(Scanner):
    """Finds the release group tag of a scene or fansub name."""

    name = 'release_group'
    category = MatchCategory.RELEASE_GROUP

    def __init__(self, known_tags: Optional[Iterable[str]] = None):
        self.known_tags: FrozenSet[str] = (
            frozenset(tag.upper() for tag in known_tags) if known_tags is not None else KNOWN_TAGS
        )

    def find_matches(self, text: str, start: int = 0, end: Optional[int] = None) -> List[Match]:
        start, end = self._region(text, start, end)
        matches: List[Match] = []

        bracketed = _BRACKETED.match(text, start, end)
        if bracketed and not bracketed.group('group').isdigit():
            matches.append(self._match(bracketed, bracketed.start(), bracketed.end(), 80))

        trailing = _TRAILING.search(text, start, end)
        if trailing and self._is_group(trailing.group('group')):
            matches.append(self._match(trailing, trailing.start(), trailing.end(), 90))
            return matches

        prefix = _PREFIX.match(text, start, end)
        if prefix:
            group = prefix.group('group')
            if self._is_group(group) and group not in COMMON_TITLE_WORDS:
                matches.append(self._match(prefix, prefix.start(), prefix.end('group') + 1, 85))

        return matches

    def _is_group(self, group: str) -> bool:
        upper = group.upper()
        if group.isdigit():
            return False
        return upper not in RELEASE_GROUP_FALSE_POSITIVES and upper not in self.known_tags

    def _match(self, m: 're.Match', span_start: int, span_end: int, confidence: int) -> Match:
        group = m.group('group')
        return Match(
            start=span_start,
            end=span_end,
            value=m.string[span_start:span_end],
            raw=group,
            category=self.category,
            confidence=confidence,
        )
